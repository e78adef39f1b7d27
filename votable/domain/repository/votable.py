"""Votable repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from votable.domain.model import Votable
from votable.domain.value import MutationOutcome, VotableId, VotableSchema, VoteMutation


class VotableRepository(ABC):
    """Repository for the Votable entity.

    Besides plain persistence, this is the atomic mutator the vote engine is
    built on. Implementations must apply each ``VoteMutation`` as a single
    indivisible match-and-update; the engine holds no locks of its own.
    """

    def __init__(self, schema: VotableSchema) -> None:
        """Initialize repository.

        Args:
            schema: Resolved vote field layout
        """
        self.schema = schema

    @abstractmethod
    async def create(self, votable_id: VotableId) -> Votable:
        """Create a votable with zeroed counters and empty voter sets.

        Args:
            votable_id: The votable's unique identifier

        Returns:
            The created votable

        Raises:
            StorageError: If the votable already exists or storage fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, votable_id: VotableId) -> Optional[Votable]:
        """Find a votable by ID.

        Args:
            votable_id: The votable's unique identifier

        Returns:
            The votable if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, votable_id: VotableId) -> bool:
        """Delete a votable along with its vote fields.

        Args:
            votable_id: The votable's unique identifier

        Returns:
            True if a votable was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def apply(self, mutation: VoteMutation) -> MutationOutcome:
        """Apply a conditional vote mutation atomically.

        Matches the votable by ID and by the voter membership predicate,
        then adjusts the counter by ``mutation.delta`` and adds or removes
        the voter, all in one storage operation.

        Args:
            mutation: The mutation to apply

        Returns:
            APPLIED if the votable matched and was modified,
            NOT_MATCHED if the predicate failed (or the votable is missing)

        Raises:
            StorageError: If the storage call fails
        """
        pass
