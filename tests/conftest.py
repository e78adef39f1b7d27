"""Test configuration and helpers."""

from uuid import uuid4

from votable.domain.value import PolarityFields, VotableId, VotableSchema, VoterIdType


def make_schema(
    downvotes: bool = True,
    voter_id_type: VoterIdType = VoterIdType.UUID,
    indexed: bool = False,
    weight: int = 1,
) -> VotableSchema:
    """Helper function to build a vote field layout with default names.

    Args:
        downvotes: Whether downvoting is enabled
        voter_id_type: Storage type of voter ids
        indexed: Whether (id, voter set) indexes are declared
        weight: Counter step per vote

    Returns:
        Resolved schema
    """
    return VotableSchema(
        downvotes=(
            PolarityFields(count="downvotes", voters="downvoters")
            if downvotes
            else None
        ),
        voter_id_type=voter_id_type,
        indexed=indexed,
        weight=weight,
    )


def new_votable_id() -> VotableId:
    """Helper function to generate a fresh votable ID."""
    return VotableId(uuid4())
