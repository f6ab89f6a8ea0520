"""ring.py: builds a small ring and opens a repl for poking at it."""
import sys

import IPython
from loguru import logger

from chordring import ChordRing

logger.enable("chordring")


def main() -> None:
    """Joins the given ids (default 0 30 65 110 160 230) into a 2^8 ring."""
    ids = [int(arg) for arg in sys.argv[1:]] or [0, 30, 65, 110, 160, 230]

    ring = ChordRing()
    contact = None
    for node_id in ids:
        node = ring.create_node(node_id)
        ring.join(node, contact)
        contact = node

    repl_locals = {
        'ring': ring,
        'nodes': {n.id: n for n in ring.nodes()},
    }
    print("starting repl. access `ring` and `nodes[id]`", file=sys.stderr)
    IPython.embed(user_ns=repl_locals)


if __name__ == '__main__':
    main()
