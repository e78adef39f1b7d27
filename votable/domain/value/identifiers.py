"""Strongly typed identifiers for votable entities and their voters.

Voter identifiers are either UUIDs or opaque strings, depending on the
configured voter id type.
"""

from typing import NewType, Union
from uuid import UUID

VotableId = NewType("VotableId", UUID)

# Voter ids are stored as-is in the voter sets
VoterId = Union[UUID, str]
