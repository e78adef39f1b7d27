"""Votable entity.

A votable is any persisted entity that carries vote counters and the sets
of voters behind them. The tally is derived on read, never stored.
"""

from pydantic import Field

from votable.domain.model.common import DomainModel
from votable.domain.value import Polarity, VotableId, VoterId


class VoteLedger(DomainModel):
    """Counter and voter set for one polarity.

    Business rules:
    - The counter moves together with the set, inside one storage operation
    - A voter appears at most once (set semantics)
    """

    count: int = 0
    voters: frozenset[VoterId] = Field(default_factory=frozenset)

    def has_voter(self, voter_id: VoterId) -> bool:
        """Check whether a voter is recorded in this ledger."""
        return voter_id in self.voters


class Votable(DomainModel):
    """Votable entity.

    ``downvotes`` is None when the schema has downvoting disabled.
    """

    id: VotableId
    upvotes: VoteLedger = Field(default_factory=VoteLedger)
    downvotes: VoteLedger | None = Field(default_factory=VoteLedger)

    def ledger(self, polarity: Polarity) -> VoteLedger | None:
        """Ledger for a polarity, None if the polarity is not tracked."""
        return self.upvotes if polarity == Polarity.UP else self.downvotes

    def has_voted(self, voter_id: VoterId, polarity: Polarity) -> bool:
        """Check whether a voter holds an active vote of a polarity."""
        ledger = self.ledger(polarity)
        return ledger is not None and ledger.has_voter(voter_id)
