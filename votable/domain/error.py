"""Domain layer errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from votable.domain.value.types import Polarity


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DownvotingDisabledError(DomainError):
    """Raised when a downvote operation is issued against an upvote-only schema."""

    def __init__(self) -> None:
        super().__init__("Downvoting is disabled for this votable schema")


class StorageError(DomainError):
    """Raised when the underlying storage call fails.

    Never retried by the engine; the caller owns retry policy.
    """

    pass


class PartialArbitrationError(StorageError):
    """Raised when a cast cleared the opposite vote but failed to record.

    The votable is left with neither polarity recorded for the voter.
    The storage failure from the record step is chained as ``__cause__``.
    """

    def __init__(self, polarity: "Polarity", voter_id: str):
        self.polarity = polarity
        self.voter_id = voter_id
        self.completed_step = f"cancel_{polarity.opposite.value}vote"
        super().__init__(
            f"Cancelled {polarity.opposite.value}vote for voter {voter_id} "
            f"but failed to record {polarity.value}vote"
        )
