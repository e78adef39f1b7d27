"""Polarity arbitration domain service."""

import logfire

from votable.domain.error import (
    DownvotingDisabledError,
    PartialArbitrationError,
    StorageError,
)
from votable.domain.value import (
    CastResult,
    MutationOutcome,
    Polarity,
    VotableId,
    VotableSchema,
    VoterId,
)

from .base import Service
from .vote_canceller import VoteCanceller
from .vote_recorder import VoteRecorder


class PolarityArbiter(Service):
    """Keeps each voter on at most one polarity per votable.

    A cast runs two independent atomic mutations in order: cancel the
    opposite polarity, then record the requested one. They are not wrapped
    in a transaction, so a failure between them leaves the voter with no
    vote at all. That window is reported through ``PartialArbitrationError``
    and left to the caller to reconcile.
    """

    def __init__(
        self,
        vote_recorder: VoteRecorder,
        vote_canceller: VoteCanceller,
        schema: VotableSchema,
    ) -> None:
        """Initialize polarity arbiter.

        Args:
            vote_recorder: Vote recorder service
            vote_canceller: Vote canceller service
            schema: Resolved vote field layout
        """
        self.vote_recorder = vote_recorder
        self.vote_canceller = vote_canceller
        self.schema = schema

    async def cast(
        self,
        votable_id: VotableId,
        voter_id: VoterId,
        polarity: Polarity,
    ) -> CastResult:
        """Cast a vote, clearing any vote of the opposite polarity first.

        Args:
            votable_id: Votable ID
            voter_id: Voter ID
            polarity: Requested polarity

        Returns:
            Which of the two steps changed state

        Raises:
            DownvotingDisabledError: If a downvote is cast on an upvote-only schema
            StorageError: If the cancel step fails (nothing was recorded)
            PartialArbitrationError: If the record step fails after the
                opposite vote was cancelled
        """
        with logfire.span(
            "cast_vote",
            votable_id=str(votable_id),
            voter_id=str(voter_id),
            polarity=polarity.value,
        ):
            if not self.schema.downvoting_enabled:
                if polarity == Polarity.DOWN:
                    raise DownvotingDisabledError()
                recorded = await self.vote_recorder.record(
                    votable_id, voter_id, polarity
                )
                return CastResult(polarity=polarity, recorded=recorded)

            # Step 1: an error here propagates and step 2 never runs
            opposite_cancelled = await self.vote_canceller.cancel(
                votable_id, voter_id, polarity.opposite
            )

            # Step 2
            try:
                recorded = await self.vote_recorder.record(
                    votable_id, voter_id, polarity
                )
            except StorageError as e:
                if opposite_cancelled != MutationOutcome.APPLIED:
                    raise
                logfire.warn(
                    "Cast left voter without a vote",
                    votable_id=str(votable_id),
                    voter_id=str(voter_id),
                    polarity=polarity.value,
                    error=str(e),
                )
                raise PartialArbitrationError(polarity, str(voter_id)) from e

            return CastResult(
                polarity=polarity,
                opposite_cancelled=opposite_cancelled,
                recorded=recorded,
            )

    async def cancel(
        self,
        votable_id: VotableId,
        voter_id: VoterId,
        polarity: Polarity,
    ) -> MutationOutcome:
        """Cancel a vote. No arbitration is needed, this passes straight through."""
        return await self.vote_canceller.cancel(votable_id, voter_id, polarity)
