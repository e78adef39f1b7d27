"""Vote domain service."""

import logfire

from votable.domain.error import NotFoundError, ValidationError
from votable.domain.model import Votable
from votable.domain.repository import VotableRepository
from votable.domain.value import (
    CastResult,
    MutationOutcome,
    Polarity,
    VotableId,
    VotableSchema,
    VoterId,
)

from .base import Service
from .polarity_arbiter import PolarityArbiter
from .tally_view import TallyView


class VoteService(Service):
    """Domain service for vote operations on votables.

    Upvote and downvote are mutually exclusive casts; cancelling is a plain
    single-step mutation.
    """

    def __init__(
        self,
        votable_repository: VotableRepository,
        polarity_arbiter: PolarityArbiter,
        tally_view: TallyView,
        schema: VotableSchema,
    ) -> None:
        """Initialize vote service.

        Args:
            votable_repository: Votable repository
            polarity_arbiter: Polarity arbiter service
            tally_view: Tally derivation
            schema: Resolved vote field layout
        """
        self.votable_repository = votable_repository
        self.polarity_arbiter = polarity_arbiter
        self.tally_view = tally_view
        self.schema = schema

    async def create_votable(self, votable_id: VotableId) -> Votable:
        """Create a votable with empty vote fields."""
        with logfire.span("create_votable", votable_id=str(votable_id)):
            return await self.votable_repository.create(votable_id)

    async def get_votable(self, votable_id: VotableId) -> Votable:
        """Get a votable by ID.

        Raises:
            NotFoundError: If the votable doesn't exist
        """
        votable = await self.votable_repository.find_by_id(votable_id)
        if votable is None:
            logfire.warn("Votable not found", votable_id=str(votable_id))
            raise NotFoundError("Votable", str(votable_id))
        return votable

    async def get_tally(self, votable_id: VotableId) -> int:
        """Get the current tally of a votable.

        Raises:
            NotFoundError: If the votable doesn't exist
        """
        votable = await self.get_votable(votable_id)
        return self.tally_view.value(votable)

    async def has_voted(
        self, votable_id: VotableId, voter_id: VoterId, polarity: Polarity
    ) -> bool:
        """Check whether a voter currently holds a vote of a polarity.

        Raises:
            NotFoundError: If the votable doesn't exist
            ValidationError: If the voter id is invalid
        """
        try:
            voter_id = self.schema.coerce_voter_id(voter_id)
        except ValueError as e:
            raise ValidationError(f"Invalid voter id: {voter_id}") from e

        votable = await self.get_votable(votable_id)
        return votable.has_voted(voter_id, polarity)

    async def upvote(self, votable_id: VotableId, voter_id: VoterId) -> CastResult:
        """Upvote a votable, replacing any downvote by the same voter."""
        return await self.polarity_arbiter.cast(votable_id, voter_id, Polarity.UP)

    async def downvote(self, votable_id: VotableId, voter_id: VoterId) -> CastResult:
        """Downvote a votable, replacing any upvote by the same voter.

        Raises:
            DownvotingDisabledError: If the schema is upvote-only
        """
        return await self.polarity_arbiter.cast(votable_id, voter_id, Polarity.DOWN)

    async def cancel_upvote(
        self, votable_id: VotableId, voter_id: VoterId
    ) -> MutationOutcome:
        """Cancel a voter's upvote."""
        return await self.polarity_arbiter.cancel(votable_id, voter_id, Polarity.UP)

    async def cancel_downvote(
        self, votable_id: VotableId, voter_id: VoterId
    ) -> MutationOutcome:
        """Cancel a voter's downvote.

        Raises:
            DownvotingDisabledError: If the schema is upvote-only
        """
        return await self.polarity_arbiter.cancel(votable_id, voter_id, Polarity.DOWN)
