"""Mappers for converting between database rows and domain models.

Column names come from the configured vote field layout, so every mapper
takes the ``VotableSchema`` alongside the row.
"""

from typing import Any, Dict
from uuid import UUID

from votable.domain.model import Votable, VoteLedger
from votable.domain.value import Polarity, VotableId, VotableSchema


def row_to_ledger(
    row: Dict[str, Any], schema: VotableSchema, polarity: Polarity
) -> VoteLedger:
    """Convert the columns of one polarity to a VoteLedger."""
    fields = schema.fields_for(polarity)
    return VoteLedger(
        count=row[fields.count],
        voters=frozenset(row[fields.voters] or ()),
    )


def row_to_votable(row: Dict[str, Any], schema: VotableSchema) -> Votable:
    """Convert database row to Votable domain model.

    Args:
        row: Database row as dict
        schema: Resolved vote field layout

    Returns:
        Votable domain model
    """
    return Votable(
        id=VotableId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        upvotes=row_to_ledger(row, schema, Polarity.UP),
        downvotes=(
            row_to_ledger(row, schema, Polarity.DOWN)
            if schema.downvoting_enabled
            else None
        ),
    )


def empty_votable(votable_id: VotableId, schema: VotableSchema) -> Votable:
    """A freshly created votable: zero counters, empty voter sets."""
    return Votable(
        id=votable_id,
        upvotes=VoteLedger(),
        downvotes=VoteLedger() if schema.downvoting_enabled else None,
    )
