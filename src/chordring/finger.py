"""finger.py: per-node routing table."""
from typing import TYPE_CHECKING, List, Optional, Tuple

from loguru import logger

from .ring import finger_start, in_interval

if TYPE_CHECKING:
    from .directory import MembershipDirectory


class FingerTable:
    """Routing table of a single node.

    Entry i holds the id of the member owning (owner_id + 2^i) mod 2^m.
    Entries are ids rather than node handles; callers resolve them through
    the membership directory when they need the node itself. Every entry is
    None until the owner joins a ring, and again after it leaves.

    Attributes:
        owner_id (int): id of the node this table belongs to.
        m (int): ring exponent, also the number of entries.
        starts (list[int]): the ring position covered by each entry.
        entries (list[int | None]): owner id of each position.
    """
    __slots__ = ('owner_id', 'm', 'starts', 'entries')

    def __init__(self, owner_id: int, m: int) -> None:
        self.owner_id = owner_id
        self.m = m
        self.starts: List[int] = [
            finger_start(owner_id, i, m) for i in range(m)
        ]
        self.entries: List[Optional[int]] = [None] * m



    @property
    def successor(self) -> Optional[int]:
        """Id of the owner's immediate successor (entry 0)."""
        return self.entries[0]



    def recompute(self, directory: "MembershipDirectory") -> None:
        """Rebuilds every entry from the current membership.

        The whole table is computed before it replaces the old one, so an
        EmptyRingError leaves the previous entries untouched.
        """
        entries = [directory.successor_of(start).id for start in self.starts]
        self.entries = entries
        logger.debug(f"finger table of {self.owner_id}: {entries}")



    def clear(self) -> None:
        """Forgets every entry."""
        self.entries = [None] * self.m



    def closest_preceding_finger(self, key: int) -> int:
        """Finds the farthest finger strictly between the owner and key.

        Args:
            key: target position on the ring.

        Returns:
            int: id of the closest preceding finger, or ``owner_id`` when
                no finger gets any closer to key.
        """
        for entry in reversed(self.entries):
            if (entry is not None
                    and entry != self.owner_id
                    and in_interval(entry, self.owner_id, key)):
                return entry
        return self.owner_id



    def rows(self) -> List[Tuple[int, Optional[int]]]:
        """(interval start, owner id) for every entry, in index order."""
        return list(zip(self.starts, self.entries))



    def __len__(self) -> int:
        return self.m



    def __repr__(self) -> str:
        return f"FingerTable({self.owner_id}: {self.entries})"
