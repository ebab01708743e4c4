"""
Primitive processes

The axioms of the algebra:
- e (empty place) and f (full place): the two states of a place
- src (source), snk (sink)
- id: a wire
- xs, xm: xor split and merge gateways
- as, am: and split and merge gateways

Every primitive is built once, when this module is imported, and shared
read-only by every composite that uses it.
"""

from typing import FrozenSet, Iterable, Tuple
import logging

from .lazy import Successor
from .matrix import RelationMatrix
from .process import Process


logger = logging.getLogger(__name__)


def singleton(process: Process) -> FrozenSet[Successor]:
    """Cell holding a single reference to `process`"""
    return frozenset([Successor.of(process)])


def _self_looping(
    name: str,
    inputs: int,
    outputs: int,
    cells: Iterable[Tuple[int, int]]
) -> Process:
    """Primitive whose defined cells all lead back to itself"""
    matrix = RelationMatrix(inputs, outputs)
    process = Process(matrix, name)
    for i, j in cells:
        matrix.set(i, j, singleton(process))
    matrix.freeze()
    return process


def _places() -> Tuple[Process, Process]:
    """
    Build the empty and full place

    The two refer to each other, so both are allocated over blank matrices
    first and their cells are filled in once both exist.
    """
    empty_matrix = RelationMatrix(2, 2)
    full_matrix = RelationMatrix(2, 2)
    e = Process(empty_matrix, 'e')
    f = Process(full_matrix, 'f')

    empty_matrix.set(0, 0, singleton(e))
    empty_matrix.set(1, 0, singleton(f))

    full_matrix.set(0, 1, singleton(f))
    full_matrix.set(1, 1, singleton(f))

    empty_matrix.freeze()
    full_matrix.freeze()

    return e, f


EMPTY_PLACE, FULL_PLACE = _places()
SOURCE = _self_looping('src', 1, 2, [(0, 0), (0, 1)])
SINK = _self_looping('snk', 2, 1, [(0, 0), (1, 0)])
IDENTITY = _self_looping('id', 2, 2, [(0, 0), (1, 1)])
XOR_SPLIT = _self_looping('xs', 2, 4, [(0, 0), (1, 1), (1, 2)])
XOR_MERGE = _self_looping('xm', 4, 2, [(0, 0), (1, 1), (2, 1)])
AND_SPLIT = _self_looping('as', 2, 4, [(0, 0), (1, 3)])
AND_MERGE = _self_looping('am', 4, 2, [(0, 0), (3, 1)])

PRIMITIVES = (
    EMPTY_PLACE,
    FULL_PLACE,
    SOURCE,
    SINK,
    IDENTITY,
    XOR_SPLIT,
    XOR_MERGE,
    AND_SPLIT,
    AND_MERGE,
)

logger.debug("Built primitives: %s", ', '.join(p.name for p in PRIMITIVES))


def empty_place() -> Process:
    """
    Empty place (2 → 2)

    Firing input 0 keeps it empty, firing input 1 fills it.
    """
    return EMPTY_PLACE


def full_place() -> Process:
    """
    Full place (2 → 2)

    Firing input 0 while emitting on output 1 keeps it full; firing
    input 1 loops back to the full place.
    """
    return FULL_PLACE


def source() -> Process:
    """Source (1 → 2): reproduces itself on either output"""
    return SOURCE


def sink() -> Process:
    """Sink (2 → 1): either input reproduces it on the single output"""
    return SINK


def identity() -> Process:
    """Wire (2 → 2): input i reaches output i, nothing else"""
    return IDENTITY


def xor_split() -> Process:
    """Xor split (2 → 4): one input fans out to one of two output pairs"""
    return XOR_SPLIT


def xor_merge() -> Process:
    """Xor merge (4 → 2): either input pair converges on the matching output"""
    return XOR_MERGE


def and_split() -> Process:
    """And split (2 → 4): fires only through the synchronised corner (1, 3)"""
    return AND_SPLIT


def and_merge() -> Process:
    """And merge (4 → 2): emits only once all required inputs fire, via (3, 1)"""
    return AND_MERGE
