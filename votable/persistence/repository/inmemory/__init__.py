"""In-memory repository implementations for testing."""

from .votable import InMemoryVotableRepository

__all__ = [
    "InMemoryVotableRepository",
]
