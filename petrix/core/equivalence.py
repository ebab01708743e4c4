"""
Structural comparison of processes

Processes are identity-compared and their names are display-only, so laws
such as `seq(identity(), p) ≅ p` are checked structurally instead: same
arities, same defined cells, same number of successors per cell, and
recursively the same structure for the successors up to a chosen depth.
"""

from typing import Tuple
import numpy as np

from .process import Process


def relation_profile(process: Process) -> np.ndarray:
    """
    Successor counts of a process

    Returns
    -------
    profile : np.ndarray
        profile[i, j] = number of references in cell (i, j), 0 if undefined
    """
    return process.matrix.counts()


def same_profile(p: Process, q: Process) -> bool:
    """Check if two processes have equal arities and successor counts"""
    return p.shape == q.shape and np.array_equal(relation_profile(p), relation_profile(q))


def signature(process: Process, depth: int = 1) -> Tuple:
    """
    Hashable structural signature, ignoring names

    Parameters
    ----------
    process : Process
        Process to describe
    depth : int
        Number of steps to unroll. At depth 0 only the arities are kept;
        at depth n every defined cell contributes the sorted signatures of
        its forced successors at depth n - 1.

    Returns
    -------
    signature : tuple
        Nested tuple, equal for structurally equivalent processes

    Examples
    --------
    >>> signature(identity(), depth=1)
    ((2, 2), ((0, 0, (((2, 2),),)), (1, 1, (((2, 2),),))))
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")
    if depth == 0:
        return (process.shape,)

    cells = tuple(
        (i, j, tuple(sorted(signature(reference(), depth - 1) for reference in cell)))
        for i, j, cell in process.transitions()
    )
    return (process.shape, cells)


def equivalent(p: Process, q: Process, depth: int = 1) -> bool:
    """
    Check if p and q unroll to the same structure for `depth` steps

    Examples
    --------
    >>> equivalent(seq(identity(), empty_place()), empty_place(), depth=2)
    True
    """
    return signature(p, depth) == signature(q, depth)
