"""_node.py: a ring member and its local key store."""
from typing import Any, Dict, List, Optional, Tuple

from .finger import FingerTable
from .ring import in_interval


class _Node:
    """A single member of a Chord ring.

    A node owns its finger table and the keys it is responsible for. It
    does not know whether it is a member; that is the directory's job, and
    the ring refreshes its finger table whenever membership changes.

    Attributes:
        id (int): position of the node on the ring.
        finger (FingerTable): routing table, all None until the node joins.
        keys (dict[int, Any]): the local store.
    """
    __slots__ = ('id', 'finger', 'keys')

    def __init__(self, node_id: int, m: int) -> None:
        self.id = node_id
        self.finger = FingerTable(node_id, m)
        self.keys: Dict[int, Any] = {}


    @property
    def finger_table(self) -> List[Optional[int]]:
        """Ids currently held by the finger table."""
        return list(self.finger.entries)


    def successor(self) -> Optional[int]:
        """Id of this node's successor, or None if it never joined."""
        return self.finger.successor


    def closest_preceding_finger(self, key: int) -> int:
        """Id of the finger to forward a lookup for ``key`` to."""
        return self.finger.closest_preceding_finger(key)


    def put(self, key: int, value: Any = None) -> None:
        """Stores value under key, replacing any previous value."""
        self.keys[key] = value


    def get(self, key: int) -> Any:
        """Value stored under key, None when the key is absent."""
        return self.keys.get(key)


    def delete(self, key: int) -> bool:
        """Drops key from the store.

        Returns:
            bool: whether the key was present.
        """
        return self.keys.pop(key, _MISSING) is not _MISSING


    def items(self) -> List[Tuple[int, Any]]:
        """(key, value) pairs in ascending key order."""
        return sorted(self.keys.items())


    def take_range(self, start: int, end: int) -> Dict[int, Any]:
        """Removes and returns the keys on the arc (start, end]."""
        taken = {
            k: v for k, v in self.keys.items()
            if in_interval(k, start, end, inclusive=True)
        }
        for k in taken:
            del self.keys[k]
        return taken


    def take_all(self) -> Dict[int, Any]:
        """Removes and returns every key."""
        taken = self.keys
        self.keys = {}
        return taken


    def __repr__(self) -> str:
        return f"Node({self.id})"


_MISSING = object()
