"""Unit tests for TallyView."""

from uuid import uuid4

import pytest

from votable.domain.error import ValidationError
from votable.domain.model import Votable, VoteLedger
from votable.domain.service import TallyView
from votable.domain.value import PolarityFields, VotableSchema
from tests.conftest import make_schema, new_votable_id


def ledger(*voters) -> VoteLedger:
    return VoteLedger(count=len(voters), voters=frozenset(voters))


class TestValue:
    """Tests for value method."""

    def test_net_tally_with_downvoting(self):
        """Tally should be upvotes minus downvotes."""
        view = TallyView(make_schema())
        votable = Votable(
            id=new_votable_id(),
            upvotes=ledger(uuid4(), uuid4(), uuid4()),
            downvotes=ledger(uuid4()),
        )

        assert view.value(votable) == 2

    def test_tally_can_be_negative(self):
        """More downvotes than upvotes gives a negative tally."""
        view = TallyView(make_schema())
        votable = Votable(
            id=new_votable_id(),
            upvotes=ledger(),
            downvotes=ledger(uuid4(), uuid4()),
        )

        assert view.value(votable) == -2

    def test_tally_is_upvote_count_without_downvoting(self):
        """Upvote-only layouts expose the raw upvote count."""
        view = TallyView(make_schema(downvotes=False))
        votable = Votable(
            id=new_votable_id(), upvotes=ledger(uuid4(), uuid4()), downvotes=None
        )

        assert view.value(votable) == 2

    def test_tally_uses_counters_not_set_sizes(self):
        """Weighted votes make counters differ from set sizes."""
        view = TallyView(make_schema())
        votable = Votable(
            id=new_votable_id(),
            upvotes=VoteLedger(count=5, voters=frozenset({uuid4()})),
            downvotes=VoteLedger(count=1, voters=frozenset({uuid4()})),
        )

        assert view.value(votable) == 4

    def test_missing_downvote_ledger_raises(self):
        """A snapshot without downvotes does not fit a schema that tracks them."""
        view = TallyView(make_schema())
        votable = Votable(id=new_votable_id(), upvotes=ledger(uuid4()), downvotes=None)

        with pytest.raises(ValidationError, match="downvote ledger"):
            view.value(votable)


class TestProject:
    """Tests for project method."""

    def test_project_uses_configured_field_names(self):
        """The document is keyed by the configured names, tally included."""
        schema = VotableSchema(
            tally="score",
            upvotes=PolarityFields(count="likes", voters="likers"),
            downvotes=PolarityFields(count="dislikes", voters="dislikers"),
        )
        view = TallyView(schema)
        votable = Votable(
            id=new_votable_id(),
            upvotes=ledger("b", "a"),
            downvotes=ledger("c"),
        )

        document = view.project(votable)

        assert document == {
            "id": votable.id,
            "likes": 2,
            "likers": ["a", "b"],
            "dislikes": 1,
            "dislikers": ["c"],
            "score": 1,
        }

    def test_project_omits_downvote_fields_when_disabled(self):
        """Upvote-only documents carry no downvote fields."""
        view = TallyView(make_schema(downvotes=False))
        votable = Votable(id=new_votable_id(), upvotes=ledger("a"), downvotes=None)

        document = view.project(votable)

        assert set(document) == {"id", "upvotes", "upvoters", "votes"}
        assert document["votes"] == 1
