"""test_ring.py: tests for ring-space arithmetic."""
import pytest

from chordring.errors import InvalidIdError
from chordring.ring import finger_start, in_interval, ring_size, validate_id


def test_in_interval_plain_range() -> None:
    """Checks (a, b) and (a, b] when the arc does not wrap."""
    assert in_interval(30, 10, 50) is True
    assert in_interval(10, 10, 50) is False
    assert in_interval(50, 10, 50) is False
    assert in_interval(50, 10, 50, inclusive=True) is True
    assert in_interval(5, 10, 50, inclusive=True) is False
    assert in_interval(55, 10, 50, inclusive=True) is False


def test_in_interval_wrap_around() -> None:
    """Checks arcs that pass through 0."""
    assert in_interval(250, 230, 30) is True
    assert in_interval(0, 230, 30) is True
    assert in_interval(29, 230, 30) is True
    assert in_interval(30, 230, 30) is False
    assert in_interval(30, 230, 30, inclusive=True) is True
    assert in_interval(230, 230, 30, inclusive=True) is False
    assert in_interval(100, 230, 30, inclusive=True) is False


def test_in_interval_full_circle() -> None:
    """When both ends coincide the arc is the whole ring."""
    for x in (0, 10, 11, 255):
        assert in_interval(x, 10, 10) is True
        assert in_interval(x, 10, 10, inclusive=True) is True


def test_ring_size_and_finger_start() -> None:
    """Finger starts wrap modulo the ring size."""
    assert ring_size(8) == 256
    assert finger_start(0, 0, 8) == 1
    assert finger_start(0, 7, 8) == 128
    assert finger_start(160, 7, 8) == 32
    assert finger_start(255, 0, 8) == 0


@pytest.mark.parametrize("value", [-1, 256, 1000, 1.5, "3", None, True])
def test_validate_id_rejects(value: object) -> None:
    """Values outside [0, 2^m) or of the wrong type are rejected.

    Args:
        value: a candidate id.
    """
    with pytest.raises(InvalidIdError):
        validate_id(value, 8)


def test_validate_id_accepts_bounds() -> None:
    """Both ends of the ring space are valid ids."""
    assert validate_id(0, 8) == 0
    assert validate_id(255, 8) == 255


def test_invalid_id_is_a_value_error() -> None:
    """InvalidIdError can be caught as ValueError."""
    with pytest.raises(ValueError, match="outside the ring space"):
        validate_id(300, 8)
