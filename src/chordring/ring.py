"""ring.py: arithmetic over the circular identifier space."""
from typing import Any

from .errors import InvalidIdError

DEFAULT_M: int = 8


def ring_size(m: int) -> int:
    """Number of positions on a ring with exponent ``m``."""
    return 2 ** m


def finger_start(node_id: int, i: int, m: int) -> int:
    """Position covered by finger ``i`` of ``node_id``.

    Args:
        node_id: id of the node owning the finger table.
        i: finger index, 0 <= i < m.
        m: ring exponent.

    Returns:
        int: (node_id + 2^i) mod 2^m
    """
    return (node_id + (1 << i)) % ring_size(m)


def in_interval(x: int, a: int, b: int, inclusive: bool = False) -> bool:
    """Checks whether x lies on the arc walking clockwise from a to b.

    The arc always excludes a. It includes b only when ``inclusive`` is set.
    When a == b the arc is the whole ring and every x matches.

    Args:
        x: position to test.
        a: start of the arc (exclusive).
        b: end of the arc.
        inclusive: whether b itself belongs to the arc.

    Returns:
        bool: True if x is on the arc.
    """
    if a < b:
        return a < x <= b if inclusive else a < x < b
    if a > b:
        # the arc wraps through 0
        return x > a or (x <= b if inclusive else x < b)
    return True


def validate_id(value: Any, m: int) -> int:
    """Returns ``value`` if it is a valid position on a 2^m ring.

    Raises:
        InvalidIdError: value is not an int in [0, 2^m).
    """
    if (isinstance(value, bool) or not isinstance(value, int)
            or not 0 <= value < ring_size(m)):
        raise InvalidIdError(value, m)
    return value
