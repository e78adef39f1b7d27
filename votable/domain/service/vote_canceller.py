"""Vote canceller domain service."""

import logfire

from votable.domain.value import (
    MutationOutcome,
    Polarity,
    VotableId,
    VoterId,
    VoteMutation,
)

from .base import VoteMutationService


class VoteCanceller(VoteMutationService):
    """Cancels a vote, provided the voter currently holds it."""

    async def cancel(
        self,
        votable_id: VotableId,
        voter_id: VoterId,
        polarity: Polarity,
    ) -> MutationOutcome:
        """Cancel a vote of a given polarity.

        Removes the voter from the polarity's voter set and decrements its
        counter in one atomic mutation.

        Args:
            votable_id: Votable ID
            voter_id: Voter ID
            polarity: Polarity to cancel
        Returns:
            APPLIED, or NOT_MATCHED if the voter holds no such vote

        Raises:
            StorageError: If the storage call fails
        """
        with logfire.span(
            "cancel_vote",
            votable_id=str(votable_id),
            voter_id=str(voter_id),
            polarity=polarity.value,
        ):
            voter_id = self._prepare(voter_id, polarity)
            outcome = await self.votable_repository.apply(
                VoteMutation.cancel(
                    votable_id, voter_id, polarity, weight=self.schema.weight
                )
            )

            if outcome.applied:
                logfire.info(
                    "Vote cancelled",
                    votable_id=str(votable_id),
                    voter_id=str(voter_id),
                    polarity=polarity.value,
                )
            else:
                logfire.info(
                    "No vote to cancel",
                    votable_id=str(votable_id),
                    voter_id=str(voter_id),
                    polarity=polarity.value,
                )

            return outcome
