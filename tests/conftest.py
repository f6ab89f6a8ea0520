"""conftest.py: shared fixtures for chordring tests."""
from typing import Callable, Dict, Iterable

import pytest
from loguru import logger

from chordring import ChordRing, Node

logger.enable("chordring")

SCENARIO_IDS = (0, 30, 65, 110, 160, 230)


@pytest.fixture
def ring() -> ChordRing:
    """Provides an empty ring with the default 2^8 space."""
    return ChordRing()


@pytest.fixture
def nodes(ring: ChordRing) -> Dict[int, Node]:
    """Joins nodes 0, 30, 65, 110, 160 and 230 in that order.

    Each node joins through the node that joined before it, the way the
    example walkthrough builds its ring.

    Args:
        ring: A fixture providing an empty ring.

    Returns:
        dict[int, Node]: the joined nodes, by id.
    """
    joined: Dict[int, Node] = {}
    contact = None
    for node_id in SCENARIO_IDS:
        node = ring.create_node(node_id)
        ring.join(node, contact)
        joined[node_id] = node
        contact = node
    return joined


@pytest.fixture
def expected_owner() -> Callable[[Iterable[int], int], int]:
    """Provides the ownership rule computed directly from member ids.

    Returns:
        Callable: maps (ids, position) to the smallest id >= position,
            wrapping to the smallest id.
    """
    def owner(ids: Iterable[int], position: int) -> int:
        ordered = sorted(ids)
        for node_id in ordered:
            if node_id >= position:
                return node_id
        return ordered[0]
    return owner
