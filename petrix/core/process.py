"""
Process representation

A Process is a component with a fixed number of input and output channels.
Its one-step behaviour is a relation: for each pair (input i, output j) the
set of processes reachable by jointly firing i and j, or no transition.
"""

from typing import FrozenSet, Iterator, List, Tuple

from .lazy import Successor, force_all
from .matrix import Cell, RelationMatrix


class Process:
    """
    Named, fixed-arity wrapper around a relation matrix

    Arities are the matrix dimensions. The name is only used for display:
    processes compare and hash by identity, since structurally distinct
    processes may share a name.

    Parameters
    ----------
    matrix : RelationMatrix
        One-step relation
    name : str
        Display name

    Examples
    --------
    >>> e = empty_place()
    >>> e.input_arity(), e.output_arity()
    (2, 2)
    >>> [p.name for p in e.successors(1, 0)]
    ['f']
    >>> e.lookup(0, 1) is None
    True
    """

    __slots__ = ('_matrix', '_name')

    def __init__(self, matrix: RelationMatrix, name: str = 'unknown'):
        if not isinstance(matrix, RelationMatrix):
            raise TypeError(f"Expected RelationMatrix, got {type(matrix)}")
        self._matrix = matrix
        self._name = name

    @property
    def name(self) -> str:
        """Display name"""
        return self._name

    @property
    def matrix(self) -> RelationMatrix:
        """Underlying relation matrix"""
        return self._matrix

    @property
    def shape(self) -> Tuple[int, int]:
        """(input arity, output arity)"""
        return self._matrix.dimensions()

    def input_arity(self) -> int:
        """Number of input channels"""
        return self._matrix.dimensions()[0]

    def output_arity(self) -> int:
        """Number of output channels"""
        return self._matrix.dimensions()[1]

    def lookup(self, i: int, j: int) -> Cell:
        """
        One-step relation for input i and output j

        Returns
        -------
        successors : FrozenSet[Successor] or None
            Lazy references to the reachable processes, None if firing
            (i, j) is not a transition
        """
        return self._matrix.get(i, j)

    def reachable(self, i: int) -> FrozenSet[Successor]:
        """
        Everything reachable by consuming input i

        Union of `lookup(i, j)` over all output channels j. Empty when the
        row holds no transition.
        """
        result = set()
        for cell in self._matrix.row(i):
            if cell is not None:
                result.update(cell)
        return frozenset(result)

    def successors(self, i: int, j: int) -> List['Process']:
        """Force the references of cell (i, j); empty list if undefined"""
        cell = self.lookup(i, j)
        if cell is None:
            return []
        return force_all(cell)

    def transitions(self) -> Iterator[Tuple[int, int, FrozenSet[Successor]]]:
        """Iterate over defined cells as (i, j, successors)"""
        return self._matrix.cells()

    def render(self, binary_labels: bool = True) -> str:
        """Textual dump of the one-step relation"""
        from ..utils.display import format_relation
        return format_relation(self, binary_labels=binary_labels)

    def __repr__(self) -> str:
        return (
            f"Process(name={self._name!r}, "
            f"arity={self.input_arity()}→{self.output_arity()})"
        )

    def __str__(self) -> str:
        return self._name
