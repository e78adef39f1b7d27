"""Domain value objects for votables."""

from votable.domain.value.identifiers import VotableId, VoterId
from votable.domain.value.types import (
    CastResult,
    MutationOutcome,
    Polarity,
    PolarityFields,
    SetOperation,
    VotableSchema,
    VoteMutation,
    VoterIdType,
)

__all__ = [
    # Identifiers
    "VotableId",
    "VoterId",
    # Types
    "CastResult",
    "MutationOutcome",
    "Polarity",
    "PolarityFields",
    "SetOperation",
    "VotableSchema",
    "VoteMutation",
    "VoterIdType",
]
