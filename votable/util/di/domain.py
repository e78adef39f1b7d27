"""Domain layer DI providers."""

from dishka import Scope, provide

from votable.domain.repository import VotableRepository
from votable.domain.service import (
    PolarityArbiter,
    TallyView,
    VoteCanceller,
    VoteRecorder,
    VoteService,
)
from votable.domain.value import VotableSchema
from votable.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_vote_recorder(
        self, votable_repository: VotableRepository, schema: VotableSchema
    ) -> VoteRecorder:
        """Provide vote recorder."""
        return VoteRecorder(votable_repository=votable_repository, schema=schema)

    @provide
    def get_vote_canceller(
        self, votable_repository: VotableRepository, schema: VotableSchema
    ) -> VoteCanceller:
        """Provide vote canceller."""
        return VoteCanceller(votable_repository=votable_repository, schema=schema)

    @provide
    def get_polarity_arbiter(
        self,
        vote_recorder: VoteRecorder,
        vote_canceller: VoteCanceller,
        schema: VotableSchema,
    ) -> PolarityArbiter:
        """Provide polarity arbiter."""
        return PolarityArbiter(
            vote_recorder=vote_recorder,
            vote_canceller=vote_canceller,
            schema=schema,
        )

    @provide(scope=Scope.APP)
    def get_tally_view(self, schema: VotableSchema) -> TallyView:
        """Provide tally view."""
        return TallyView(schema=schema)

    @provide
    def get_vote_service(
        self,
        votable_repository: VotableRepository,
        polarity_arbiter: PolarityArbiter,
        tally_view: TallyView,
        schema: VotableSchema,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            votable_repository=votable_repository,
            polarity_arbiter=polarity_arbiter,
            tally_view=tally_view,
            schema=schema,
        )
