"""Unit tests for VotableSchema and VoteMutation value objects."""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from votable.domain.error import DownvotingDisabledError
from votable.domain.value import (
    Polarity,
    PolarityFields,
    SetOperation,
    VotableSchema,
    VoteMutation,
    VoterIdType,
)
from tests.conftest import make_schema, new_votable_id


class TestVotableSchema:
    """Tests for the resolved vote field layout."""

    def test_defaults_match_plugin_field_names(self):
        """Default layout should use votes/upvotes/upvoters/downvotes/downvoters."""
        schema = VotableSchema()

        assert schema.tally == "votes"
        assert schema.upvotes == PolarityFields(count="upvotes", voters="upvoters")
        assert schema.downvotes == PolarityFields(
            count="downvotes", voters="downvoters"
        )
        assert schema.downvoting_enabled is True
        assert schema.polarities == (Polarity.UP, Polarity.DOWN)

    def test_upvote_only_layout_tracks_single_polarity(self):
        """Without downvote fields only the up polarity is tracked."""
        schema = make_schema(downvotes=False)

        assert schema.downvoting_enabled is False
        assert schema.polarities == (Polarity.UP,)

    @pytest.mark.parametrize("weight", [0, -1, True])
    def test_weight_must_be_a_positive_integer(self, weight):
        """Weights below one, and bools, are rejected."""
        with pytest.raises(ValidationError):
            VotableSchema(weight=weight)

    def test_fields_for_down_on_upvote_only_layout_raises(self):
        """Asking for downvote fields on an upvote-only layout should fail."""
        schema = make_schema(downvotes=False)

        with pytest.raises(DownvotingDisabledError):
            schema.fields_for(Polarity.DOWN)

    def test_tally_colliding_with_upvoter_set_is_rejected(self):
        """A tally named like the upvoter set would shadow it, so reject it."""
        with pytest.raises(ValidationError, match="collides"):
            VotableSchema(tally="upvoters")

    def test_tally_colliding_with_downvote_counter_is_rejected(self):
        """The tally must not reuse any stored field name."""
        with pytest.raises(ValidationError, match="collides"):
            VotableSchema(tally="downvotes")

    def test_tally_may_reuse_downvote_names_when_downvoting_disabled(self):
        """Downvote names are unused when downvoting is off."""
        schema = VotableSchema(tally="downvotes", downvotes=None)

        assert schema.tally == "downvotes"

    def test_duplicate_stored_field_names_are_rejected(self):
        """Two polarities cannot share a counter column."""
        with pytest.raises(ValidationError, match="distinct"):
            VotableSchema(
                downvotes=PolarityFields(count="upvotes", voters="downvoters")
            )

    def test_id_is_reserved(self):
        """The identifier column name cannot be reused."""
        with pytest.raises(ValidationError, match="reserved"):
            VotableSchema(upvotes=PolarityFields(count="id", voters="upvoters"))

    def test_coerce_uuid_voter_id_from_string(self):
        """UUID voter ids given as strings are parsed."""
        schema = make_schema()
        voter = uuid4()

        assert schema.coerce_voter_id(str(voter)) == voter
        assert isinstance(schema.coerce_voter_id(str(voter)), UUID)

    def test_coerce_invalid_uuid_voter_id_raises(self):
        """Non-UUID strings are rejected for a uuid layout."""
        schema = make_schema()

        with pytest.raises(ValueError):
            schema.coerce_voter_id("not-a-uuid")

    def test_coerce_text_voter_id(self):
        """Text layouts keep voter ids as strings."""
        schema = make_schema(voter_id_type=VoterIdType.TEXT)
        voter = uuid4()

        assert schema.coerce_voter_id("v1") == "v1"
        assert schema.coerce_voter_id(voter) == str(voter)


class TestVoteMutation:
    """Tests for VoteMutation constructors."""

    def test_record_requires_absence_and_increments(self):
        """A record mutation adds the voter only if absent."""
        mutation = VoteMutation.record(new_votable_id(), "v1", Polarity.UP, weight=2)

        assert mutation.require_member is False
        assert mutation.set_operation == SetOperation.ADD
        assert mutation.delta == 2

    def test_cancel_requires_presence_and_decrements(self):
        """A cancel mutation removes the voter only if present."""
        mutation = VoteMutation.cancel(new_votable_id(), "v1", Polarity.DOWN)

        assert mutation.require_member is True
        assert mutation.set_operation == SetOperation.REMOVE
        assert mutation.delta == -1

    def test_inconsistent_mutation_is_rejected(self):
        """Adding a voter while decrementing would desync the count from the set."""
        with pytest.raises(ValidationError):
            VoteMutation(
                votable_id=new_votable_id(),
                polarity=Polarity.UP,
                voter_id="v1",
                require_member=False,
                set_operation=SetOperation.ADD,
                delta=-1,
            )

    def test_polarity_opposite(self):
        """Each polarity has the other as its opposite."""
        assert Polarity.UP.opposite == Polarity.DOWN
        assert Polarity.DOWN.opposite == Polarity.UP
