"""errors.py: exceptions raised by chordring."""
from typing import Any


class ChordError(Exception):
    """Base class for every error raised by the ring."""


class InvalidIdError(ChordError, ValueError):
    """An id or key falls outside the ring space."""

    def __init__(self, value: Any, m: int) -> None:
        self.value = value
        self.m = m
        super().__init__(
            f"id {value!r} is outside the ring space [0, {2 ** m})"
        )


class DuplicateIdError(ChordError):
    """A node tried to join with an id that is already active."""

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"node {node_id} is already a member of the ring")


class EmptyRingError(ChordError):
    """The ring has no (other) members to answer the request."""


class NotAMemberError(ChordError, LookupError):
    """A node that is not currently active was used as a member."""

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"node {node_id} is not a member of the ring")
