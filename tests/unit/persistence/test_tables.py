"""Unit tests for votables table construction."""

from sqlalchemy import Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID

from votable.domain.value import VoterIdType
from votable.persistence.tables import build_votables_table
from tests.conftest import make_schema


class TestBuildVotablesTable:
    """Tests for build_votables_table."""

    def test_columns_for_default_layout(self):
        """Both polarities get a counter and a voter array."""
        table = build_votables_table(make_schema())

        assert table.name == "votables"
        assert [c.name for c in table.columns] == [
            "id",
            "upvotes",
            "upvoters",
            "downvotes",
            "downvoters",
        ]
        assert table.c.id.primary_key
        assert isinstance(table.c.upvotes.type, Integer)
        assert table.c.upvotes.server_default.arg == "0"
        assert isinstance(table.c.upvoters.type, ARRAY)
        assert isinstance(table.c.upvoters.type.item_type, UUID)
        assert table.c.upvoters.server_default.arg == "{}"
        assert not table.indexes

    def test_upvote_only_layout_has_no_downvote_columns(self):
        """Downvote columns are absent entirely when disabled."""
        table = build_votables_table(make_schema(downvotes=False))

        assert [c.name for c in table.columns] == ["id", "upvotes", "upvoters"]

    def test_text_voter_ids(self):
        """Text layouts store voter ids as text arrays."""
        table = build_votables_table(make_schema(voter_id_type=VoterIdType.TEXT))

        assert isinstance(table.c.downvoters.type.item_type, Text)

    def test_indexed_layout_declares_membership_indexes(self):
        """Each voter set gets an (id, voters) index."""
        table = build_votables_table(make_schema(indexed=True))

        indexes = {
            index.name: [c.name for c in index.columns] for index in table.indexes
        }
        assert indexes == {
            "idx_votables_upvoters": ["id", "upvoters"],
            "idx_votables_downvoters": ["id", "downvoters"],
        }
