"""Domain model entities for votables."""

from votable.domain.model.votable import Votable, VoteLedger

__all__ = [
    "Votable",
    "VoteLedger",
]
