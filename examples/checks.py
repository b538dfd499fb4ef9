"""Datatype checks referenced by demo.yaml."""
from uuid import UUID

from argtree import ErrorCode


def uuid_check(token: str) -> int:
    """Accept a valid UUID string."""
    try:
        UUID(token)
    except ValueError:
        return ErrorCode.WRONG_DATA
    return ErrorCode.NO_ERR
