"""chordring.py: chordring api."""
import threading
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from loguru import logger

from ._node import _Node
from .directory import MembershipDirectory
from .errors import ChordError, EmptyRingError, NotAMemberError
from .lookup import LookupResult, find_key
from .ring import DEFAULT_M, ring_size, validate_id

Node = _Node


@dataclass(frozen=True)
class MigrationReport:
    """Keys that changed owner during a join or leave.

    Attributes:
        source_id: node the keys were taken from (None if nothing moved).
        target_id: node the keys were handed to (None if nothing moved).
        keys: the migrated keys, ascending.
    """
    source_id: Optional[int] = None
    target_id: Optional[int] = None
    keys: Tuple[int, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.keys)


class ChordRing:
    """Interface for building and querying a Chord ring in process.

    Every membership change refreshes the finger table of every member
    before it returns, so callers never observe a partially stabilized
    ring. All public operations hold one lock for their whole duration.
    """
    _m: int
    _directory: MembershipDirectory

    def __init__(self, m: int = DEFAULT_M) -> None:
        """Creates an empty ring.

        Args:
            m: ring exponent; ids and keys live in [0, 2^m). Fixed for the
                lifetime of the ring.

        Raises:
            ValueError: m is not a positive integer.
        """
        if isinstance(m, bool) or not isinstance(m, int) or m < 1:
            raise ValueError(f"ring exponent must be a positive int, got {m!r}")
        self._m = m
        self._directory = MembershipDirectory(m)
        self._lock = threading.RLock()


    @property
    def m(self) -> int:
        """Ring exponent."""
        return self._m


    @property
    def size(self) -> int:
        """Number of positions on the ring."""
        return ring_size(self._m)


    def create_node(self, node_id: int) -> _Node:
        """Creates a standalone node that can later join this ring.

        Raises:
            InvalidIdError: node_id is outside the ring space.
        """
        validate_id(node_id, self._m)
        return _Node(node_id, self._m)


    def join(self, node: _Node, contact: Optional[_Node] = None
    ) -> MigrationReport:
        """Admits ``node`` to the ring.

        The first member joins without a contact. Every later member names
        an existing member as contact, and takes over the keys of its new
        successor that now fall in its range.

        Args:
            node: a node created by this ring that is not yet a member.
            contact: any active member, or None on an empty ring.

        Returns:
            MigrationReport: keys moved from the successor to ``node``.

        Raises:
            InvalidIdError: node's id is outside the ring space.
            DuplicateIdError: the id is already active.
            NotAMemberError: contact is not an active member.
            ChordError: no contact was given but the ring is not empty.
        """
        with self._lock:
            validate_id(node.id, self._m)
            self._check_compatible(node)
            if contact is None:
                if len(self._directory):
                    raise ChordError(
                        f"node {node.id} needs a contact to join a ring "
                        "that already has members"
                    )
            elif contact not in self._directory:
                raise NotAMemberError(contact.id)

            self._directory.add(node)
            self._stabilize()
            logger.info(f"node {node.id} joined the ring")
            if contact is None:
                return MigrationReport()

            pred = self._directory.previous_member(node)
            succ = self._directory.next_member(node)
            moved = succ.take_range(pred.id, node.id)
            node.keys.update(moved)
            report = MigrationReport(succ.id, node.id, tuple(sorted(moved)))
            if report:
                logger.info(
                    f"migrated keys from node {succ.id} to node {node.id}: "
                    f"{' '.join(str(k) for k in report.keys)}"
                )
            return report


    def leave(self, node: _Node) -> MigrationReport:
        """Removes ``node`` from the ring, handing its keys to its successor.

        Returns:
            MigrationReport: keys moved from ``node`` to its successor.

        Raises:
            NotAMemberError: node is not an active member.
            EmptyRingError: node is the only member.
        """
        with self._lock:
            succ = self._directory.next_member(node)
            if succ is node:
                raise EmptyRingError(
                    f"node {node.id} is the last member and cannot leave"
                )

            moved = node.take_all()
            succ.keys.update(moved)
            self._directory.remove(node)
            node.finger.clear()
            self._stabilize()

            report = MigrationReport(node.id, succ.id, tuple(sorted(moved)))
            logger.info(
                f"node {node.id} left the ring, "
                f"{len(report.keys)} keys moved to node {succ.id}"
            )
            return report


    def insert_key(self, node: _Node, key: int, value: Any = None) -> None:
        """Stores ``value`` under ``key`` at its owner, routed from ``node``."""
        with self._lock:
            owner = self._route(node, key).owner
            owner.put(key, value)
            logger.debug(f"stored key {key} at node {owner.id}")


    def remove_key(self, node: _Node, key: int) -> None:
        """Deletes ``key`` from its owner. Missing keys are ignored."""
        with self._lock:
            owner = self._route(node, key).owner
            if owner.delete(key):
                logger.debug(f"removed key {key} from node {owner.id}")


    def find_key(self, node: _Node, key: int) -> Tuple[int, List[int]]:
        """Looks up the owner of ``key`` starting from ``node``.

        Returns:
            tuple[int, list[int]]: owner id and the ids visited, starting
                with node and ending with the owner.
        """
        with self._lock:
            owner, path = self._route(node, key)
            return owner.id, path


    def get_value(self, node: _Node, key: int) -> Tuple[int, Any]:
        """Looks up ``key`` and reads it from its owner.

        Returns:
            tuple[int, Any]: owner id and stored value (None if absent).
        """
        with self._lock:
            owner = self._route(node, key).owner
            return owner.id, owner.get(key)


    def finger_table_of(self, node: _Node) -> List[Tuple[int, Optional[int]]]:
        """(interval start, owner id) for each of the node's M fingers."""
        with self._lock:
            return node.finger.rows()


    def keys_of(self, node: _Node) -> List[Tuple[int, Any]]:
        """(key, value) pairs stored at ``node``, ascending by key."""
        with self._lock:
            return node.items()


    def nodes(self) -> List[_Node]:
        """Active members in ascending id order."""
        with self._lock:
            return list(self._directory)


    def node(self, node_id: int) -> _Node:
        """The active member with id ``node_id``.

        Raises:
            NotAMemberError: no active member has that id.
        """
        with self._lock:
            return self._directory.resolve(node_id)


    def _route(self, node: _Node, key: int) -> LookupResult:
        validate_id(key, self._m)
        return find_key(node, key, self._directory)


    def _stabilize(self) -> None:
        """Recomputes the finger table of every member."""
        for member in self._directory:
            member.finger.recompute(self._directory)


    def _check_compatible(self, node: _Node) -> None:
        if node.finger.m != self._m:
            raise ValueError(
                f"node {node.id} was built for a 2^{node.finger.m} ring, "
                f"this ring is 2^{self._m}"
            )


    def __len__(self) -> int:
        return len(self._directory)


    def __contains__(self, node: object) -> bool:
        return node in self._directory


    def __iter__(self) -> Iterator[_Node]:
        return iter(self.nodes())
