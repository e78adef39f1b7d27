"""Vote use cases."""

from .cancel_vote import CancelVoteRequest, CancelVoteResponse, CancelVoteUseCase
from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_tally import GetTallyRequest, GetTallyResponse, GetTallyUseCase

__all__ = [
    "CancelVoteRequest",
    "CancelVoteResponse",
    "CancelVoteUseCase",
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetTallyRequest",
    "GetTallyResponse",
    "GetTallyUseCase",
]
