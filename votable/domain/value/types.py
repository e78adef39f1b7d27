"""Domain value objects for votables.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from votable.domain.error import DownvotingDisabledError
from votable.domain.value.common import ValueObject
from votable.domain.value.identifiers import VotableId, VoterId


class Polarity(str, Enum):
    """Which voter set and counter an operation targets."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Polarity":
        """The polarity a cast must cancel first."""
        return Polarity.DOWN if self is Polarity.UP else Polarity.UP


class MutationOutcome(str, Enum):
    """Result of a conditional mutation.

    NOT_MATCHED means the membership predicate failed (already voted, or
    never voted). It is an expected outcome, not a failure.
    """

    APPLIED = "applied"
    NOT_MATCHED = "not_matched"

    @property
    def applied(self) -> bool:
        return self is MutationOutcome.APPLIED


class SetOperation(str, Enum):
    """Membership change applied to a voter set."""

    ADD = "add"
    REMOVE = "remove"


class VoterIdType(str, Enum):
    """Storage type of voter identifiers."""

    UUID = "uuid"
    TEXT = "text"


class VoteMutation(ValueObject):
    """A single conditional find-and-update against one votable.

    Storage must apply it as one indivisible step: match on ``votable_id``
    and on voter membership, then adjust the counter by ``delta`` and
    add or remove the voter.
    """

    votable_id: VotableId
    polarity: Polarity
    voter_id: VoterId
    require_member: bool
    set_operation: SetOperation
    delta: int

    @classmethod
    def record(
        cls,
        votable_id: VotableId,
        voter_id: VoterId,
        polarity: Polarity,
        weight: int = 1,
    ) -> "VoteMutation":
        """Add the voter and increment, only if the voter is absent."""
        return cls(
            votable_id=votable_id,
            polarity=polarity,
            voter_id=voter_id,
            require_member=False,
            set_operation=SetOperation.ADD,
            delta=weight,
        )

    @classmethod
    def cancel(
        cls,
        votable_id: VotableId,
        voter_id: VoterId,
        polarity: Polarity,
        weight: int = 1,
    ) -> "VoteMutation":
        """Remove the voter and decrement, only if the voter is present."""
        return cls(
            votable_id=votable_id,
            polarity=polarity,
            voter_id=voter_id,
            require_member=True,
            set_operation=SetOperation.REMOVE,
            delta=-weight,
        )

    @model_validator(mode="after")
    def validate_direction(self) -> "VoteMutation":
        """Adding must increment and removing must decrement."""
        if self.set_operation == SetOperation.ADD and (
            self.require_member or self.delta <= 0
        ):
            raise ValueError("An add mutation must require absence and increment")
        if self.set_operation == SetOperation.REMOVE and (
            not self.require_member or self.delta >= 0
        ):
            raise ValueError("A remove mutation must require presence and decrement")
        return self


class PolarityFields(ValueObject):
    """Storage field names for one polarity."""

    count: str
    voters: str


class VotableSchema(ValueObject):
    """Vote field layout, resolved once from configuration.

    ``downvotes`` is None when downvoting is disabled.
    ``weight`` is the counter step for both recording and cancelling, so a
    cancel always undoes exactly what the matching record added.
    """

    table_name: str = "votables"
    tally: str = "votes"
    upvotes: PolarityFields = PolarityFields(count="upvotes", voters="upvoters")
    downvotes: PolarityFields | None = PolarityFields(
        count="downvotes", voters="downvoters"
    )
    voter_id_type: VoterIdType = VoterIdType.UUID
    indexed: bool = False
    weight: int = Field(default=1, ge=1, strict=True)

    @field_validator("table_name", "tally")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Field names must not be empty")
        return v

    @model_validator(mode="after")
    def validate_field_names(self) -> "VotableSchema":
        """Reject layouts where two fields share a name.

        A tally named like the upvoter set would shadow the set with a
        derived scalar.
        """
        names = [self.upvotes.count, self.upvotes.voters]
        if self.downvotes is not None:
            names += [self.downvotes.count, self.downvotes.voters]
        if any(not name for name in names):
            raise ValueError("Field names must not be empty")
        if "id" in names or self.tally == "id":
            raise ValueError("'id' is reserved for the votable identifier")
        if self.tally in names:
            raise ValueError(
                f"Tally name '{self.tally}' collides with a stored vote field"
            )
        if len(set(names)) != len(names):
            raise ValueError(f"Vote field names must be distinct: {names}")
        return self

    @property
    def downvoting_enabled(self) -> bool:
        return self.downvotes is not None

    @property
    def polarities(self) -> tuple[Polarity, ...]:
        """Polarities this schema tracks."""
        if self.downvoting_enabled:
            return (Polarity.UP, Polarity.DOWN)
        return (Polarity.UP,)

    def fields_for(self, polarity: Polarity) -> PolarityFields:
        """Field names for a polarity.

        Raises:
            DownvotingDisabledError: If polarity is DOWN and downvoting is off
        """
        if polarity == Polarity.UP:
            return self.upvotes
        if self.downvotes is None:
            raise DownvotingDisabledError()
        return self.downvotes

    def coerce_voter_id(self, voter_id: VoterId) -> VoterId:
        """Normalise a voter id to the configured storage type.

        Raises:
            ValueError: If a uuid voter id cannot be parsed
        """
        if self.voter_id_type == VoterIdType.UUID:
            return voter_id if isinstance(voter_id, UUID) else UUID(str(voter_id))
        return str(voter_id)


class CastResult(ValueObject):
    """Outcome of each step of a polarity cast.

    ``opposite_cancelled`` is APPLIED when the cast cleared an earlier vote of
    the other polarity; ``recorded`` is NOT_MATCHED when the voter already held
    the requested polarity.
    """

    polarity: Polarity
    opposite_cancelled: MutationOutcome = MutationOutcome.NOT_MATCHED
    recorded: MutationOutcome

    @property
    def switched(self) -> bool:
        """True if the cast moved the voter from one polarity to the other."""
        return self.opposite_cancelled.applied and self.recorded.applied
