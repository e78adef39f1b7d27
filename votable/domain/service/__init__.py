"""Domain services."""

from .base import Service, VoteMutationService
from .polarity_arbiter import PolarityArbiter
from .tally_view import TallyView
from .vote_canceller import VoteCanceller
from .vote_recorder import VoteRecorder
from .vote_service import VoteService

__all__ = [
    "PolarityArbiter",
    "Service",
    "TallyView",
    "VoteCanceller",
    "VoteMutationService",
    "VoteRecorder",
    "VoteService",
]
