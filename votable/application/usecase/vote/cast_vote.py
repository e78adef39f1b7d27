"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from votable.application.usecase.base import BaseUseCase
from votable.domain.service import TallyView, VoteService
from votable.domain.value import Polarity, VotableId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_id: str  # UUID string
    voter_id: str
    polarity: Polarity


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_id: str
    polarity: Polarity
    opposite_cancelled: bool
    recorded: bool
    tally: int
    message: str


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for upvoting or downvoting a votable."""

    def __init__(self, vote_service: VoteService, tally_view: TallyView) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            tally_view: Tally derivation
        """
        self.vote_service = vote_service
        self.tally_view = tally_view

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Which steps changed state, and the tally afterwards

        Raises:
            NotFoundError: If the votable doesn't exist
            DownvotingDisabledError: If downvoting is disabled
            PartialArbitrationError: If the opposite vote was cancelled but
                the new vote could not be recorded
        """
        votable_id = VotableId(UUID(request.votable_id))

        if request.polarity == Polarity.UP:
            result = await self.vote_service.upvote(votable_id, request.voter_id)
        else:  # Polarity.DOWN
            result = await self.vote_service.downvote(votable_id, request.voter_id)

        votable = await self.vote_service.get_votable(votable_id)

        if result.switched:
            message = f"Vote switched to {request.polarity.value}vote"
        elif result.recorded.applied:
            message = f"{request.polarity.value.capitalize()}vote recorded"
        else:
            message = f"Already {request.polarity.value}voted"

        return CastVoteResponse(
            votable_id=str(votable_id),
            polarity=result.polarity,
            opposite_cancelled=result.opposite_cancelled.applied,
            recorded=result.recorded.applied,
            tally=self.tally_view.value(votable),
            message=message,
        )
