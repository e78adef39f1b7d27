"""Core DI providers (non-mockable)."""

from dishka import Scope, provide
from pydantic import ValidationError

from votable.config import Settings, VotingSettings
from votable.domain.value import PolarityFields, VotableSchema, VoterIdType
from votable.util.di.base import ProviderBase
from votable.util.error import ConfigurationError


def resolve_votable_schema(votes: VotingSettings) -> VotableSchema:
    """Resolve vote settings into the fixed field layout used everywhere else.

    Args:
        votes: Vote settings

    Returns:
        Resolved schema

    Raises:
        ConfigurationError: If field names are empty or collide
    """
    try:
        return VotableSchema(
            table_name=votes.table_name,
            tally=votes.tally_name,
            upvotes=PolarityFields(
                count=votes.upvotes_name, voters=votes.upvoters_name
            ),
            downvotes=(
                None
                if votes.disable_downvotes
                else PolarityFields(
                    count=votes.downvotes_name, voters=votes.downvoters_name
                )
            ),
            voter_id_type=VoterIdType(votes.voter_id_type),
            indexed=votes.indexed,
            weight=votes.weight,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid vote field layout: {e}") from e


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide vote settings."""
        return settings.votes

    @provide(scope=Scope.APP)
    def provide_votable_schema(self, votes: VotingSettings) -> VotableSchema:
        """Provide the resolved vote field layout."""
        return resolve_votable_schema(votes)
