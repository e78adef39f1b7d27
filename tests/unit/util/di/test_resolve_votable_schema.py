"""Unit tests for resolving vote settings into a schema."""

import pytest
from pydantic import ValidationError

from votable.config import VotingSettings
from votable.domain.value import VotableSchema, VoterIdType
from votable.util.di import resolve_votable_schema
from votable.util.error import ConfigurationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestResolveVotableSchema:
    """Tests for resolve_votable_schema."""

    def test_defaults(self):
        """Default settings resolve to the standard field names."""
        # Act
        schema = resolve_votable_schema(VotingSettings())

        # Assert
        assert schema.table_name == "votables"
        assert schema.tally == "votes"
        assert schema.upvotes.count == "upvotes"
        assert schema.upvotes.voters == "upvoters"
        assert schema.downvotes is not None
        assert schema.downvotes.voters == "downvoters"
        assert schema.voter_id_type == VoterIdType.UUID

    def test_disable_downvotes_drops_downvote_fields(self):
        """Upvote-only settings leave no downvote fields at all."""
        # Act
        schema = resolve_votable_schema(
            VotingSettings(disable_downvotes=True, voter_id_type="text")
        )

        # Assert
        assert schema.downvotes is None
        assert schema.downvoting_enabled is False
        assert schema.voter_id_type == VoterIdType.TEXT

    def test_weight_is_carried_into_schema(self):
        """The configured weight becomes the step for record and cancel."""
        # Act
        schema = resolve_votable_schema(VotingSettings(weight=4))

        # Assert
        assert schema.weight == 4

    def test_non_positive_weight_is_rejected(self):
        """Settings refuse weights below one."""
        with pytest.raises(ValidationError):
            VotingSettings(weight=0)

    def test_tally_colliding_with_voter_set_is_rejected(self):
        """A tally name reusing a stored field name is a configuration error."""
        with pytest.raises(ConfigurationError):
            resolve_votable_schema(VotingSettings(tally_name="upvoters"))

    def test_duplicate_field_names_are_rejected(self):
        """Two stored fields sharing a name is a configuration error."""
        with pytest.raises(ConfigurationError):
            resolve_votable_schema(
                VotingSettings(upvotes_name="count", downvotes_name="count")
            )

    @pytest.mark.asyncio
    async def test_container_provides_schema(self, unit_env):
        """The container resolves the schema from settings."""
        # Act
        schema = await unit_env.get(VotableSchema)

        # Assert
        assert schema.tally == "votes"
