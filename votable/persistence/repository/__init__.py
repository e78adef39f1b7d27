"""PostgreSQL repository implementations."""

from votable.persistence.repository.votable import PostgresVotableRepository

__all__ = [
    "PostgresVotableRepository",
]
