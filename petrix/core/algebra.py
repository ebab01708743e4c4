"""
Process composition algebra

Operators on processes:
- tensor: Parallel composition, channel spaces paired by Cartesian index
- seq: Sequential composition, outputs of p chained into inputs of q
- feed: Feedback, folds pairs of input channels into one

N-ary forms:
- parallel: Left-to-right tensor fold
- sequence: Left-to-right seq fold

Every operator is pure: operands are never mutated and each call allocates a
new Process. Successors of composed cells are lazy, so a composite only
materialises the next step of its unrolling when a reference is forced.
"""

from functools import reduce
from itertools import product
from typing import FrozenSet, List, Tuple
import logging

from .errors import ArityMismatch, InvalidFeedbackArity
from .lazy import Successor
from .matrix import RelationMatrix
from .process import Process


logger = logging.getLogger(__name__)

TENSOR_SEPARATOR = '∥'
SEQUENTIAL_SEPARATOR = ';'
FEEDBACK_MARK = '^'


# ============================================================================
# Index Arithmetic
# ============================================================================

def tensor_index(outer: int, inner: int, inner_arity: int) -> int:
    """
    Combined channel index of a tensor product

    Channel `outer` of the left operand paired with channel `inner` of the
    right operand is channel `inner + outer * inner_arity` of the product.

    Examples
    --------
    >>> tensor_index(1, 0, 2)
    2
    """
    return inner + outer * inner_arity


def tensor_split(index: int, inner_arity: int) -> Tuple[int, int]:
    """
    Inverse of `tensor_index`

    Returns
    -------
    outer, inner : Tuple[int, int]
        Channels of the left and right operand
    """
    return divmod(index, inner_arity)


def feedback_indices(index: int) -> Tuple[int, int]:
    """
    The two input channels folded into reduced channel `index`

    The fold appends the trailing bit: (index * 2 + 0, index * 2 + 1).
    """
    return index * 2, index * 2 + 1


def _pairings(operator, left: FrozenSet[Successor], right: FrozenSet[Successor]) -> List[Successor]:
    """One deferred `operator(l(), r())` per pair of the Cartesian product"""
    return [Successor.chain(operator, l, r) for l, r in product(left, right)]


def _check_process(*processes):
    for process in processes:
        if not isinstance(process, Process):
            raise TypeError(f"Expected Process, got {type(process)}")


# ============================================================================
# Operators
# ============================================================================

def tensor(p: Process, q: Process) -> Process:
    """
    Parallel composition p ∥ q

    Input arity is p.in * q.in, output arity p.out * q.out. Cell
    (tensor_index(i, z, q.in), tensor_index(j, w, q.out)) is defined iff
    both p.lookup(i, j) and q.lookup(z, w) are; it holds one reference per
    pair of their successors, forcing to the tensor of the pair.

    Parameters
    ----------
    p, q : Process
        Operands

    Returns
    -------
    result : Process
        Parallel composite

    Examples
    --------
    >>> wires = tensor(identity(), identity())
    >>> wires.shape
    (4, 4)
    >>> wires.name
    'id∥id'
    """
    _check_process(p, q)
    q_in, q_out = q.shape

    matrix = RelationMatrix(p.input_arity() * q_in, p.output_arity() * q_out)
    for i, j, p_cell in p.transitions():
        for z, w, q_cell in q.transitions():
            matrix.set(
                tensor_index(i, z, q_in),
                tensor_index(j, w, q_out),
                _pairings(tensor, p_cell, q_cell)
            )

    result = Process(matrix.freeze(), f"{p.name}{TENSOR_SEPARATOR}{q.name}")
    logger.debug("tensor: %s %s", result.name, result.shape)
    return result


def seq(p: Process, q: Process) -> Process:
    """
    Sequential composition p ; q

    Relational composition over the (union, Cartesian product) semiring:
    cell (i, j) collects, for every intermediate channel z, the pairs of
    p.lookup(i, z) × q.lookup(z, j), each forcing to the sequential
    composite of the pair. Undefined when no z contributes.

    Parameters
    ----------
    p : Process
        First process
    q : Process
        Second process, q.input_arity() must equal p.output_arity()

    Returns
    -------
    result : Process
        Process with p's inputs and q's outputs

    Raises
    ------
    ArityMismatch
        If p's outputs do not match q's inputs

    Examples
    --------
    >>> loop = seq(source(), sink())
    >>> loop.shape
    (1, 1)
    >>> len(loop.lookup(0, 0))
    2
    """
    _check_process(p, q)
    if p.output_arity() != q.input_arity():
        raise ArityMismatch(p.output_arity(), q.input_arity())

    matrix = RelationMatrix(p.input_arity(), q.output_arity())
    for i in range(p.input_arity()):
        for j in range(q.output_arity()):
            total = []
            for z in range(p.output_arity()):
                p_next = p.lookup(i, z)
                q_next = q.lookup(z, j)
                if p_next is not None and q_next is not None:
                    total.extend(_pairings(seq, p_next, q_next))
            matrix.set(i, j, total)

    result = Process(matrix.freeze(), f"{p.name}{SEQUENTIAL_SEPARATOR}{q.name}")
    logger.debug("seq: %s %s", result.name, result.shape)
    return result


def feed(p: Process) -> Process:
    """
    Feedback p^

    Halves the input arity: reduced channel i stands for the two channels
    given by `feedback_indices(i)`, and cell (i, j) is the union of p's
    cells on both. p's successor references are reused as they are.

    Raises
    ------
    InvalidFeedbackArity
        If p has an odd number of inputs

    Examples
    --------
    >>> looped = feed(xor_merge())
    >>> looped.shape
    (2, 2)
    """
    _check_process(p)
    if p.input_arity() % 2 != 0:
        raise InvalidFeedbackArity(p.input_arity())

    matrix = RelationMatrix(p.input_arity() // 2, p.output_arity())
    for i in range(matrix.dimensions()[0]):
        low, high = feedback_indices(i)
        for j in range(p.output_arity()):
            merged = set()
            for index in (low, high):
                cell = p.lookup(index, j)
                if cell is not None:
                    merged.update(cell)
            matrix.set(i, j, merged)

    result = Process(matrix.freeze(), f"{p.name}{FEEDBACK_MARK}")
    logger.debug("feed: %s %s", result.name, result.shape)
    return result


# ============================================================================
# N-ary Composition
# ============================================================================

def parallel(*processes: Process) -> Process:
    """
    Tensor several processes left to right

    parallel(p, q, r) = tensor(tensor(p, q), r)
    """
    if not processes:
        raise ValueError("parallel() needs at least one process")
    return reduce(tensor, processes)


def sequence(*processes: Process) -> Process:
    """
    Chain several processes left to right (pipeline style)

    sequence(p, q, r) = seq(seq(p, q), r)

    Raises
    ------
    ArityMismatch
        If any two neighbours have incompatible channels
    """
    if not processes:
        raise ValueError("sequence() needs at least one process")
    return reduce(seq, processes)
