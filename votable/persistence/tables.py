"""SQLAlchemy table definitions for votables.

The votables table is shaped by the configured vote field layout, so it is
built from a ``VotableSchema`` rather than declared statically.
"""

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID

from votable.domain.value import VotableSchema, VoterIdType


def build_votables_table(
    schema: VotableSchema, metadata: MetaData | None = None
) -> Table:
    """Build the votables table for a vote field layout.

    Counters default to 0 and voter sets to an empty array. Downvote columns
    exist only when downvoting is enabled. With ``schema.indexed`` an
    (id, voter set) index is added per polarity.

    Args:
        schema: Resolved vote field layout
        metadata: Metadata to attach the table to (a fresh one if omitted)

    Returns:
        The table
    """
    metadata = metadata if metadata is not None else MetaData()
    voter_type = UUID() if schema.voter_id_type == VoterIdType.UUID else Text()

    columns: list[Column] = [Column("id", UUID, primary_key=True)]
    for polarity in schema.polarities:
        fields = schema.fields_for(polarity)
        columns.append(
            Column(fields.count, Integer, nullable=False, server_default="0")
        )
        columns.append(
            Column(
                fields.voters, ARRAY(voter_type), nullable=False, server_default="{}"
            )
        )

    table = Table(schema.table_name, metadata, *columns)

    if schema.indexed:
        for polarity in schema.polarities:
            voters = schema.fields_for(polarity).voters
            Index(
                f"idx_{schema.table_name}_{voters}", table.c.id, table.c[voters]
            )

    return table
