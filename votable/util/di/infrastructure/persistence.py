"""Persistence infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy import Table
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from votable.config import Settings
from votable.domain.repository import VotableRepository
from votable.domain.value import VotableSchema
from votable.persistence.database import create_engine, create_session_factory
from votable.persistence.repository import PostgresVotableRepository
from votable.persistence.tables import build_votables_table
from votable.util.di.base import ProviderBase
from votable.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_votables_table(self, schema: VotableSchema) -> Table:
        """Provide the votables table for the configured layout."""
        return build_votables_table(schema)

    @provide(scope=Scope.REQUEST)
    def get_votable_repository(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        table: Table,
        schema: VotableSchema,
    ) -> VotableRepository:
        """Provide Votable repository.

        The repository opens one transaction per call, so each vote
        mutation commits on its own.
        """
        return PostgresVotableRepository(session_factory, table, schema)
