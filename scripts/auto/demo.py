"""demo.py: replays the example walkthrough and prints the ring's state."""
import sys

from loguru import logger

from chordring import ChordRing, Node

logger.enable("chordring")

JOIN_ORDER = (0, 30, 65, 110, 160, 230)
INSERTS = [
    (0, 3, 3), (30, 200, None), (65, 123, None), (110, 45, 3),
    (160, 99, None), (65, 60, 10), (0, 50, 8), (110, 100, 5),
    (110, 101, 4), (110, 102, 6), (230, 240, 8), (230, 250, 10),
]
LOOKUP_KEYS = (3, 200, 123, 45, 99, 60, 50, 100, 101, 102, 240, 250)


def print_finger_table(ring: ChordRing, node: Node) -> None:
    print(f"Finger table of node {node.id}:")
    for start, owner_id in ring.finger_table_of(node):
        print(f"start {start} -> {owner_id}")
    print()


def print_keys(ring: ChordRing, title: str) -> None:
    print(title)
    for node in ring.nodes():
        pairs = " ".join(f"{k}:{v}" for k, v in ring.keys_of(node))
        print(f"Node {node.id}: {pairs}")
    print()


def main() -> None:
    """Builds the six-node ring, then joins 100 and removes 65."""
    logger.remove()
    logger.add(sys.stderr, level="INFO")

    ring = ChordRing(m=8)
    nodes = {}
    contact = None
    for node_id in JOIN_ORDER:
        nodes[node_id] = ring.create_node(node_id)
        ring.join(nodes[node_id], contact)
        contact = nodes[node_id]

    print("Finger Tables:")
    for node in ring.nodes():
        print_finger_table(ring, node)

    for node_id, key, value in INSERTS:
        ring.insert_key(nodes[node_id], key, value)
    print_keys(ring, "Keys Distribution:")

    nodes[100] = ring.create_node(100)
    report = ring.join(nodes[100], nodes[0])
    if report:
        print(f"Migrated keys from node {report.source_id} to node "
              f"{report.target_id}: {' '.join(map(str, report.keys))}")
    print_keys(ring, "Keys Distribution after node 100 joins:")

    for start in (nodes[0], nodes[65], nodes[100]):
        print(f"----- node {start.id} lookups -----")
        for key in LOOKUP_KEYS:
            _, path = ring.find_key(start, key)
            _, value = ring.get_value(start, key)
            print(f"Look-up result of key {key} from node {start.id} "
                  f"with path {path} value is {value}")
        print()

    ring.leave(nodes[65])
    print("Updated Finger Tables after node 65 leaves:")
    for node_id in (0, 30):
        print_finger_table(ring, nodes[node_id])
    print_keys(ring, "Keys Distribution after node 65 leaves:")


if __name__ == '__main__':
    main()
