"""
Petrix Core Module

Relation-matrix processes and their composition algebra.

This module provides:
- RelationMatrix: Fixed-size store of successor sets
- Successor: Lazy reference to a successor process
- Process: Named fixed-arity one-step relation
- Primitives: e, f, src, snk, id, xs, xm, as, am
- Algebra: tensor, seq, feed
- Equivalence: Structural comparison of processes
"""

from .errors import (
    PetrixError,
    ArityMismatch,
    InvalidFeedbackArity,
    IndexOutOfRange,
    FrozenMatrixError,
)

from .lazy import (
    Successor,
    force_all,
)

from .matrix import RelationMatrix

from .process import Process

from .primitives import (
    empty_place,
    full_place,
    source,
    sink,
    identity,
    xor_split,
    xor_merge,
    and_split,
    and_merge,
    singleton,
    EMPTY_PLACE,
    FULL_PLACE,
    SOURCE,
    SINK,
    IDENTITY,
    XOR_SPLIT,
    XOR_MERGE,
    AND_SPLIT,
    AND_MERGE,
    PRIMITIVES,
)

from .algebra import (
    tensor,
    seq,
    feed,
    parallel,
    sequence,
    tensor_index,
    tensor_split,
    feedback_indices,
)

from .equivalence import (
    relation_profile,
    same_profile,
    signature,
    equivalent,
)

__all__ = [
    # Errors
    'PetrixError',
    'ArityMismatch',
    'InvalidFeedbackArity',
    'IndexOutOfRange',
    'FrozenMatrixError',

    # Representation
    'Successor',
    'force_all',
    'RelationMatrix',
    'Process',

    # Primitives
    'empty_place',
    'full_place',
    'source',
    'sink',
    'identity',
    'xor_split',
    'xor_merge',
    'and_split',
    'and_merge',
    'singleton',
    'EMPTY_PLACE',
    'FULL_PLACE',
    'SOURCE',
    'SINK',
    'IDENTITY',
    'XOR_SPLIT',
    'XOR_MERGE',
    'AND_SPLIT',
    'AND_MERGE',
    'PRIMITIVES',

    # Composition
    'tensor',
    'seq',
    'feed',
    'parallel',
    'sequence',
    'tensor_index',
    'tensor_split',
    'feedback_indices',

    # Equivalence
    'relation_profile',
    'same_profile',
    'signature',
    'equivalent',
]

__version__ = '0.1.0'
