"""lookup.py: iterative key lookup over finger tables."""
from typing import TYPE_CHECKING, List, NamedTuple

from loguru import logger

from .errors import NotAMemberError
from .ring import in_interval

if TYPE_CHECKING:
    from ._node import _Node
    from .directory import MembershipDirectory


class LookupResult(NamedTuple):
    """Owner of a key and the ids visited while finding it."""
    owner: "_Node"
    path: List[int]

    @property
    def hops(self) -> int:
        """Number of forwarding steps taken."""
        return len(self.path) - 1


def find_key(start: "_Node",
             key: int,
             directory: "MembershipDirectory",
) -> LookupResult:
    """Walks finger tables from ``start`` to the owner of ``key``.

    At each step the walk stops if key lies on (current, successor], and
    otherwise jumps to the closest preceding finger. When no finger gets
    closer to key, the walk falls back to the successor pointer and stops
    there, so it always terminates, even on an inconsistent table.

    Args:
        start: member the lookup is issued from.
        key: position being looked up.
        directory: membership used to resolve finger ids to nodes.

    Returns:
        LookupResult: the owner, and the path from start to owner inclusive.

    Raises:
        NotAMemberError: start is not an active member.
    """
    if start not in directory:
        raise NotAMemberError(start.id)

    path = [start.id]
    current = start
    while True:
        succ = directory.resolve(_successor_id(current))
        if in_interval(key, current.id, succ.id, inclusive=True):
            path.append(succ.id)
            logger.debug(f"lookup {key}: owner {succ.id}, path {path}")
            return LookupResult(succ, path)

        next_id = current.closest_preceding_finger(key)
        if next_id == current.id:
            # no finger advances: take the successor as the answer
            path.append(succ.id)
            logger.debug(f"lookup {key}: fell back to {succ.id}, path {path}")
            return LookupResult(succ, path)

        current = directory.resolve(next_id)
        path.append(current.id)


def _successor_id(node: "_Node") -> int:
    succ = node.successor()
    if succ is None:
        raise NotAMemberError(node.id)
    return succ
