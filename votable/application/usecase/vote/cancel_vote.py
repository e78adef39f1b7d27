"""Cancel vote use case."""

from uuid import UUID

from pydantic import BaseModel

from votable.application.usecase.base import BaseUseCase
from votable.domain.service import TallyView, VoteService
from votable.domain.value import Polarity, VotableId


class CancelVoteRequest(BaseModel):
    """Cancel vote request."""

    votable_id: str  # UUID string
    voter_id: str
    polarity: Polarity


class CancelVoteResponse(BaseModel):
    """Cancel vote response."""

    success: bool
    message: str
    tally: int


class CancelVoteUseCase(BaseUseCase[CancelVoteRequest, CancelVoteResponse]):
    """Use case for withdrawing an upvote or downvote."""

    def __init__(self, vote_service: VoteService, tally_view: TallyView) -> None:
        """Initialize cancel vote use case.

        Args:
            vote_service: Vote domain service
            tally_view: Tally derivation
        """
        self.vote_service = vote_service
        self.tally_view = tally_view

    async def execute(self, request: CancelVoteRequest) -> CancelVoteResponse:
        """Execute cancel vote flow.

        Args:
            request: Cancel vote request

        Returns:
            Cancel vote response

        Raises:
            NotFoundError: If the votable doesn't exist
        """
        votable_id = VotableId(UUID(request.votable_id))

        if request.polarity == Polarity.UP:
            outcome = await self.vote_service.cancel_upvote(
                votable_id, request.voter_id
            )
        else:  # Polarity.DOWN
            outcome = await self.vote_service.cancel_downvote(
                votable_id, request.voter_id
            )

        votable = await self.vote_service.get_votable(votable_id)
        tally = self.tally_view.value(votable)

        if outcome.applied:
            return CancelVoteResponse(
                success=True,
                message="Vote cancelled successfully",
                tally=tally,
            )
        else:
            return CancelVoteResponse(
                success=False,
                message="No vote found to cancel",
                tally=tally,
            )
