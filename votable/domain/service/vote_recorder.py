"""Vote recorder domain service."""

import logfire

from votable.domain.value import (
    MutationOutcome,
    Polarity,
    VotableId,
    VoterId,
    VoteMutation,
)

from .base import VoteMutationService


class VoteRecorder(VoteMutationService):
    """Records a vote, provided the voter has not already voted that way."""

    async def record(
        self,
        votable_id: VotableId,
        voter_id: VoterId,
        polarity: Polarity,
    ) -> MutationOutcome:
        """Record a vote of a given polarity.

        Adds the voter to the polarity's voter set and increments its counter
        in one atomic mutation. A voter already in the set is not matched, so
        repeating the call is a no-op.

        Args:
            votable_id: Votable ID
            voter_id: Voter ID
            polarity: Polarity to record
        Returns:
            APPLIED, or NOT_MATCHED if the voter already voted this polarity

        Raises:
            StorageError: If the storage call fails
        """
        with logfire.span(
            "record_vote",
            votable_id=str(votable_id),
            voter_id=str(voter_id),
            polarity=polarity.value,
        ):
            voter_id = self._prepare(voter_id, polarity)
            outcome = await self.votable_repository.apply(
                VoteMutation.record(
                    votable_id, voter_id, polarity, weight=self.schema.weight
                )
            )

            if not outcome.applied:
                logfire.info(
                    "Vote already recorded",
                    votable_id=str(votable_id),
                    voter_id=str(voter_id),
                    polarity=polarity.value,
                )

            return outcome
