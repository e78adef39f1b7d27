"""Application layer DI providers."""

from dishka import Scope, provide

from votable.application.usecase.vote import (
    CancelVoteUseCase,
    CastVoteUseCase,
    GetTallyUseCase,
)
from votable.domain.service import TallyView, VoteService
from votable.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, tally_view: TallyView
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, tally_view=tally_view)

    @provide(scope=Scope.REQUEST)
    def get_cancel_vote_use_case(
        self, vote_service: VoteService, tally_view: TallyView
    ) -> CancelVoteUseCase:
        """Provide cancel vote use case."""
        return CancelVoteUseCase(vote_service=vote_service, tally_view=tally_view)

    @provide(scope=Scope.REQUEST)
    def get_get_tally_use_case(
        self, vote_service: VoteService, tally_view: TallyView
    ) -> GetTallyUseCase:
        """Provide get tally use case."""
        return GetTallyUseCase(vote_service=vote_service, tally_view=tally_view)
