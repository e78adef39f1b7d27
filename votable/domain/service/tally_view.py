"""Tally derivation."""

from typing import Any

from votable.domain.error import ValidationError
from votable.domain.model import Votable
from votable.domain.value import VotableSchema

from .base import Service


class TallyView(Service):
    """Derives the net tally from stored counters. Never mutates."""

    def __init__(self, schema: VotableSchema) -> None:
        self.schema = schema

    def value(self, votable: Votable) -> int:
        """Net tally: upvotes minus downvotes, or just upvotes if downvoting is off.

        Raises:
            ValidationError: If the schema tracks downvotes but the votable has none
        """
        if not self.schema.downvoting_enabled:
            return votable.upvotes.count
        if votable.downvotes is None:
            raise ValidationError(f"Votable {votable.id} has no downvote ledger")
        return votable.upvotes.count - votable.downvotes.count

    def project(self, votable: Votable) -> dict[str, Any]:
        """Render a votable under the configured field names, tally included.

        Voter sets are rendered as lists sorted by their string form.
        """
        document: dict[str, Any] = {"id": votable.id}
        for polarity in self.schema.polarities:
            fields = self.schema.fields_for(polarity)
            ledger = votable.ledger(polarity)
            if ledger is None:
                continue
            document[fields.count] = ledger.count
            document[fields.voters] = sorted(ledger.voters, key=str)
        document[self.schema.tally] = self.value(votable)
        return document
