"""Base service classes for domain services."""

from votable.domain.error import ValidationError
from votable.domain.repository import VotableRepository
from votable.domain.value import Polarity, VotableSchema, VoterId


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity.
    """

    pass


class VoteMutationService(Service):
    """Base for services that issue exactly one atomic vote mutation."""

    def __init__(
        self, votable_repository: VotableRepository, schema: VotableSchema
    ) -> None:
        """Initialize service.

        Args:
            votable_repository: Votable repository (the atomic mutator)
            schema: Resolved vote field layout
        """
        self.votable_repository = votable_repository
        self.schema = schema

    def _prepare(self, voter_id: VoterId, polarity: Polarity) -> VoterId:
        """Validate a mutation request and normalise the voter id.

        Raises:
            DownvotingDisabledError: If polarity is DOWN on an upvote-only schema
            ValidationError: If the voter id is invalid
        """
        self.schema.fields_for(polarity)
        try:
            return self.schema.coerce_voter_id(voter_id)
        except ValueError as e:
            raise ValidationError(f"Invalid voter id: {voter_id}") from e
