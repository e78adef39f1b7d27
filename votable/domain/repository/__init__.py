"""Repository interfaces for the votable domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from votable.domain.repository.votable import VotableRepository

__all__ = [
    "VotableRepository",
]
