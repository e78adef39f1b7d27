"""PostgreSQL implementation of Votable repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy import Table, Update, delete, func, insert, literal, not_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from votable.domain.error import StorageError
from votable.domain.model import Votable
from votable.domain.repository import VotableRepository
from votable.domain.value import (
    MutationOutcome,
    SetOperation,
    VotableId,
    VotableSchema,
    VoteMutation,
)
from votable.persistence.mappers import empty_votable, row_to_votable


class PostgresVotableRepository(VotableRepository):
    """PostgreSQL implementation of VotableRepository.

    Every call runs in its own transaction. A vote mutation is a single
    conditional UPDATE, so Postgres row locking serialises concurrent
    mutations of the same votable and re-checks the membership predicate
    against the committed row.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        table: Table,
        schema: VotableSchema,
    ) -> None:
        """Initialize repository.

        Args:
            session_factory: SQLAlchemy async session factory
            table: Votables table built for ``schema``
            schema: Resolved vote field layout
        """
        super().__init__(schema)
        self.session_factory = session_factory
        self.table = table

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        """Open a session and commit on exit, mapping driver errors to StorageError."""
        try:
            async with self.session_factory() as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            raise StorageError(f"{type(e).__name__}: {e}") from e

    async def create(self, votable_id: VotableId) -> Votable:
        """Create a votable; counters and voter sets take their column defaults."""
        stmt = insert(self.table).values(id=votable_id)
        try:
            async with self._transaction() as session:
                await session.execute(stmt)
        except StorageError as e:
            if isinstance(e.__cause__, IntegrityError):
                raise StorageError(f"Votable already exists: {votable_id}") from e
            raise
        return empty_votable(votable_id, self.schema)

    async def find_by_id(self, votable_id: VotableId) -> Optional[Votable]:
        """Find a votable by ID."""
        stmt = select(self.table).where(self.table.c.id == votable_id)
        async with self._transaction() as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return row_to_votable(row._asdict(), self.schema) if row else None

    async def delete(self, votable_id: VotableId) -> bool:
        """Delete a votable."""
        stmt = delete(self.table).where(self.table.c.id == votable_id)
        async with self._transaction() as session:
            result = await session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def apply(self, mutation: VoteMutation) -> MutationOutcome:
        """Apply a vote mutation as one conditional UPDATE."""
        stmt = self.build_update(mutation)
        async with self._transaction() as session:
            result = await session.execute(stmt)
        if result.rowcount > 0:  # type: ignore[attr-defined]
            return MutationOutcome.APPLIED
        return MutationOutcome.NOT_MATCHED

    def build_update(self, mutation: VoteMutation) -> Update:
        """Build the conditional UPDATE for a vote mutation.

        UPDATE votables
        SET upvotes = upvotes + :delta, upvoters = array_append(upvoters, :voter)
        WHERE id = :id AND NOT (upvoters @> ARRAY[:voter])
        """
        fields = self.schema.fields_for(mutation.polarity)
        count = self.table.c[fields.count]
        voters = self.table.c[fields.voters]

        voter = literal(mutation.voter_id, voters.type.item_type)
        is_member = voters.contains([mutation.voter_id])

        if mutation.set_operation == SetOperation.ADD:
            new_voters = func.array_append(voters, voter, type_=voters.type)
        else:
            new_voters = func.array_remove(voters, voter, type_=voters.type)

        return (
            self.table.update()
            .where(self.table.c.id == mutation.votable_id)
            .where(is_member if mutation.require_member else not_(is_member))
            .values({count: count + mutation.delta, voters: new_voters})
        )
