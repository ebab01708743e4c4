"""
Petrix: composable Petri-net workflow components

Workflow components (places, sources, sinks, split/merge gateways) are
processes with numbered input and output channels. Their one-step behaviour
is a relation matrix of lazy successor references, and larger nets are built
with three operators: tensor (parallel), seq (sequential) and feed
(feedback).

Examples
--------
>>> from petrix import seq, feed, source, sink, xor_merge, empty_place
>>> loop = seq(source(), sink())
>>> loop.shape
(1, 1)
>>> place = feed(seq(xor_merge(), empty_place()))
>>> place.shape
(2, 2)
>>> place.name
'xm;e^'
"""

from .core import (
    PetrixError,
    ArityMismatch,
    InvalidFeedbackArity,
    IndexOutOfRange,
    FrozenMatrixError,
    Successor,
    RelationMatrix,
    Process,
    empty_place,
    full_place,
    source,
    sink,
    identity,
    xor_split,
    xor_merge,
    and_split,
    and_merge,
    PRIMITIVES,
    tensor,
    seq,
    feed,
    parallel,
    sequence,
    tensor_index,
    tensor_split,
    feedback_indices,
    equivalent,
    relation_profile,
)

from .utils import format_relation

__all__ = [
    'PetrixError',
    'ArityMismatch',
    'InvalidFeedbackArity',
    'IndexOutOfRange',
    'FrozenMatrixError',
    'Successor',
    'RelationMatrix',
    'Process',
    'empty_place',
    'full_place',
    'source',
    'sink',
    'identity',
    'xor_split',
    'xor_merge',
    'and_split',
    'and_merge',
    'PRIMITIVES',
    'tensor',
    'seq',
    'feed',
    'parallel',
    'sequence',
    'tensor_index',
    'tensor_split',
    'feedback_indices',
    'equivalent',
    'relation_profile',
    'format_relation',
]

__version__ = '0.1.0'
