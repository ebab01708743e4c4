"""
Relation matrix: fixed-size 2D store of successor sets

Rows are indexed by input channel, columns by output channel. A cell is
either undefined (no transition) or a non-empty frozenset of successor
references.
"""

from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple
import numpy as np

from .errors import FrozenMatrixError, IndexOutOfRange
from .lazy import Successor


Cell = Optional[FrozenSet[Successor]]


class RelationMatrix:
    """
    Two-dimensional relation store backed by a numpy object array

    The matrix never resizes. Storing an empty collection stores an
    undefined cell, so "no transition" has exactly one representation.
    Once frozen, writes raise FrozenMatrixError.

    Examples
    --------
    >>> matrix = RelationMatrix(2, 2)
    >>> matrix.dimensions()
    (2, 2)
    >>> matrix.get(0, 1) is None
    True
    >>> matrix.set(0, 0, [Successor.of(identity())])
    >>> len(matrix.get(0, 0))
    1
    """

    def __init__(self, rows: int, cols: int):
        """
        Parameters
        ----------
        rows : int
            Number of input channels
        cols : int
            Number of output channels

        Raises
        ------
        ValueError
            If either dimension is negative
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Dimensions must be non-negative, got ({rows}, {cols})")

        self._rows = rows
        self._cols = cols
        self._cells = np.full((rows, cols), None, dtype=object)

    def _check_row(self, i: int):
        if not 0 <= i < self._rows:
            raise IndexOutOfRange(f"Row {i} out of range [0, {self._rows})")

    def _check(self, i: int, j: int):
        self._check_row(i)
        if not 0 <= j < self._cols:
            raise IndexOutOfRange(f"Column {j} out of range [0, {self._cols})")

    def get(self, i: int, j: int) -> Cell:
        """Get the successor set at (i, j), None if undefined"""
        self._check(i, j)
        return self._cells[i, j]

    def set(self, i: int, j: int, value: Optional[Iterable[Successor]]):
        """
        Set the successor set at (i, j)

        Parameters
        ----------
        i, j : int
            Input and output channel
        value : iterable of Successor or None
            Successor references; None or an empty iterable clears the cell
        """
        self._check(i, j)
        if self.frozen:
            raise FrozenMatrixError(f"Cannot set ({i}, {j}): relation matrix is frozen")
        if value is None:
            self._cells[i, j] = None
            return

        references = frozenset(value)
        for reference in references:
            if not isinstance(reference, Successor):
                raise TypeError(f"Cell values must be Successor, got {type(reference)}")
        self._cells[i, j] = references if references else None

    def freeze(self) -> 'RelationMatrix':
        """
        Seal the matrix against further writes

        Called once a process is fully wired; shared primitives and
        composites are read-only afterwards.

        Returns
        -------
        matrix : RelationMatrix
            self, for chaining
        """
        self._cells.flags.writeable = False
        return self

    @property
    def frozen(self) -> bool:
        """True once `freeze` has been called"""
        return not self._cells.flags.writeable

    def row(self, i: int) -> List[Cell]:
        """Cells of row i, ordered by output channel"""
        self._check_row(i)
        return list(self._cells[i])

    def dimensions(self) -> Tuple[int, int]:
        """(rows, cols)"""
        return (self._rows, self._cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    def cells(self) -> Iterator[Tuple[int, int, FrozenSet[Successor]]]:
        """Iterate over defined cells as (i, j, successors), row-major"""
        for i in range(self._rows):
            for j in range(self._cols):
                value = self._cells[i, j]
                if value is not None:
                    yield i, j, value

    def defined_mask(self) -> np.ndarray:
        """
        Boolean matrix of defined cells

        Returns
        -------
        mask : np.ndarray
            mask[i, j] is True iff cell (i, j) holds a transition
        """
        mask = np.zeros((self._rows, self._cols), dtype=bool)
        for i, j, _ in self.cells():
            mask[i, j] = True
        return mask

    def counts(self) -> np.ndarray:
        """Integer matrix of successor set sizes (0 for undefined)"""
        counts = np.zeros((self._rows, self._cols), dtype=np.int64)
        for i, j, value in self.cells():
            counts[i, j] = len(value)
        return counts

    def __repr__(self) -> str:
        return (
            f"RelationMatrix(shape={self.shape}, "
            f"defined={int(self.defined_mask().sum())})"
        )
