"""In-process model of the Chord distributed hash table.

Build a ring with :class:`ChordRing`, create nodes with
:meth:`ChordRing.create_node` and admit them with :meth:`ChordRing.join`.
Logging goes through loguru and is off until ``logger.enable("chordring")``.
"""
from loguru import logger

from .chordring import ChordRing, MigrationReport, Node
from .directory import MembershipDirectory
from .errors import (
    ChordError,
    DuplicateIdError,
    EmptyRingError,
    InvalidIdError,
    NotAMemberError,
)
from .finger import FingerTable
from .lookup import LookupResult, find_key
from .ring import DEFAULT_M, in_interval

logger.disable("chordring")

__all__=[
    'ChordRing',
    'Node',
    'MigrationReport',
    'MembershipDirectory',
    'FingerTable',
    'LookupResult',
    'find_key',
    'in_interval',
    'DEFAULT_M',
    'ChordError',
    'InvalidIdError',
    'DuplicateIdError',
    'EmptyRingError',
    'NotAMemberError',
]
