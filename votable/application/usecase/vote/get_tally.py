"""Get tally use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from votable.application.usecase.base import BaseUseCase
from votable.domain.service import TallyView, VoteService
from votable.domain.value import VotableId


class GetTallyRequest(BaseModel):
    """Get tally request."""

    votable_id: str  # UUID string


class GetTallyResponse(BaseModel):
    """Get tally response.

    ``document`` holds the vote fields under their configured names.
    """

    votable_id: str
    tally: int
    document: dict[str, Any]


class GetTallyUseCase(BaseUseCase[GetTallyRequest, GetTallyResponse]):
    """Use case for reading a votable's tally."""

    def __init__(self, vote_service: VoteService, tally_view: TallyView) -> None:
        self.vote_service = vote_service
        self.tally_view = tally_view

    async def execute(self, request: GetTallyRequest) -> GetTallyResponse:
        """Execute get tally flow.

        Raises:
            NotFoundError: If the votable doesn't exist
        """
        votable = await self.vote_service.get_votable(
            VotableId(UUID(request.votable_id))
        )
        return GetTallyResponse(
            votable_id=str(votable.id),
            tally=self.tally_view.value(votable),
            document=self.tally_view.project(votable),
        )
