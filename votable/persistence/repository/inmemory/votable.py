"""In-memory votable repository for testing."""

import asyncio
from typing import Optional

from votable.domain.error import StorageError
from votable.domain.model import Votable
from votable.domain.repository.votable import VotableRepository
from votable.domain.value import (
    MutationOutcome,
    Polarity,
    SetOperation,
    VotableId,
    VotableSchema,
    VoteMutation,
)
from votable.persistence.mappers import empty_votable


class InMemoryVotableRepository(VotableRepository):
    """In-memory implementation of VotableRepository for testing.

    A single lock plays the part of the storage engine: each mutation
    matches and writes without any other mutation interleaving.
    """

    def __init__(self, schema: VotableSchema) -> None:
        super().__init__(schema)
        self._votables: dict[VotableId, Votable] = {}
        self._lock = asyncio.Lock()

    async def create(self, votable_id: VotableId) -> Votable:
        """Create a votable.

        Raises:
            StorageError: If the votable already exists
        """
        async with self._lock:
            if votable_id in self._votables:
                raise StorageError(f"Votable already exists: {votable_id}")
            votable = empty_votable(votable_id, self.schema)
            self._votables[votable_id] = votable
            return votable

    async def find_by_id(self, votable_id: VotableId) -> Optional[Votable]:
        """Find a votable by ID."""
        return self._votables.get(votable_id)

    async def delete(self, votable_id: VotableId) -> bool:
        """Delete a votable by ID."""
        async with self._lock:
            return self._votables.pop(votable_id, None) is not None

    async def apply(self, mutation: VoteMutation) -> MutationOutcome:
        """Apply a vote mutation under the storage lock."""
        async with self._lock:
            votable = self._votables.get(mutation.votable_id)
            if votable is None:
                return MutationOutcome.NOT_MATCHED

            ledger = votable.ledger(mutation.polarity)
            if ledger is None:
                return MutationOutcome.NOT_MATCHED
            if ledger.has_voter(mutation.voter_id) != mutation.require_member:
                return MutationOutcome.NOT_MATCHED

            # Yield mid-update so concurrent callers really contend for the lock
            await asyncio.sleep(0)

            if mutation.set_operation == SetOperation.ADD:
                voters = ledger.voters | {mutation.voter_id}
            else:
                voters = ledger.voters - {mutation.voter_id}
            updated = ledger.model_copy(
                update={"count": ledger.count + mutation.delta, "voters": voters}
            )

            field = "upvotes" if mutation.polarity == Polarity.UP else "downvotes"
            self._votables[mutation.votable_id] = votable.model_copy(
                update={field: updated}
            )
            return MutationOutcome.APPLIED
