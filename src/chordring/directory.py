"""directory.py: the authoritative registry of active ring members."""
import bisect
from typing import TYPE_CHECKING, Dict, Iterator, List

from loguru import logger

from .errors import DuplicateIdError, EmptyRingError, NotAMemberError
from .ring import validate_id

if TYPE_CHECKING:
    from ._node import _Node


class MembershipDirectory:
    """Sorted set of active node ids plus the id -> node registry.

    The directory stands in for what a deployed ring would learn through
    lookups: it answers successor and predecessor queries from the global
    sorted order. Finger tables only store ids, and every id is resolved
    back to a node here, so a node that has left can never be reached.

    Attributes:
        m (int): ring exponent, fixed for the directory's lifetime.
    """
    _ids: List[int]
    _nodes: Dict[int, "_Node"]

    def __init__(self, m: int) -> None:
        self.m = m
        self._ids = []
        self._nodes = {}


    def successor_of(self, position: int) -> "_Node":
        """Finds the member owning ``position``.

        Args:
            position: a point on the ring.

        Returns:
            _Node: the member with the smallest id >= position, wrapping
                around to the smallest id.

        Raises:
            EmptyRingError: there are no members.
        """
        if not self._ids:
            raise EmptyRingError("the ring has no members")
        i = bisect.bisect_left(self._ids, position)
        if i == len(self._ids):
            i = 0
        return self._nodes[self._ids[i]]



    def next_member(self, node: "_Node") -> "_Node":
        """Returns the member right after ``node`` in ring order."""
        i = self._index_of(node)
        return self._nodes[self._ids[(i + 1) % len(self._ids)]]



    def previous_member(self, node: "_Node") -> "_Node":
        """Returns the member right before ``node`` in ring order."""
        i = self._index_of(node)
        return self._nodes[self._ids[i - 1]]



    def add(self, node: "_Node") -> None:
        """Admits ``node`` as a member.

        Raises:
            InvalidIdError: the node's id is outside the ring space.
            DuplicateIdError: the id is already taken.
        """
        validate_id(node.id, self.m)
        if node.id in self._nodes:
            raise DuplicateIdError(node.id)
        bisect.insort(self._ids, node.id)
        self._nodes[node.id] = node
        logger.debug(f"directory: added {node.id}, members {self._ids}")



    def remove(self, node: "_Node") -> None:
        """Evicts ``node``. Removing a non-member does nothing."""
        if self._nodes.get(node.id) is not node:
            return
        del self._nodes[node.id]
        self._ids.remove(node.id)
        logger.debug(f"directory: removed {node.id}, members {self._ids}")



    def resolve(self, node_id: int) -> "_Node":
        """Maps an active id back to its node.

        Raises:
            NotAMemberError: no active member has this id.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NotAMemberError(node_id) from None



    def ids(self) -> List[int]:
        """Active ids in ascending order."""
        return list(self._ids)



    def _index_of(self, node: "_Node") -> int:
        if self._nodes.get(node.id) is not node:
            raise NotAMemberError(node.id)
        return bisect.bisect_left(self._ids, node.id)



    def __contains__(self, node: object) -> bool:
        node_id = getattr(node, "id", None)
        return node_id is not None and self._nodes.get(node_id) is node



    def __len__(self) -> int:
        return len(self._ids)



    def __iter__(self) -> Iterator["_Node"]:
        return (self._nodes[node_id] for node_id in list(self._ids))
