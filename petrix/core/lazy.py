"""
Deferred successor references

A relation cell never stores successor processes directly. It stores
`Successor` objects, zero-argument producers that yield a process when
forced. This is what allows a primitive to refer to itself, the empty place
to refer to the full place before the latter is populated, and composite
processes to describe an unbounded unrolling one step at a time.
"""

from typing import Callable, Iterable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .process import Process


class Successor:
    """
    Lazy reference to a successor process

    Successors compare and hash by identity: two references created
    separately are two distinct members of a cell even when they produce
    the same process. Forcing is not memoized, so a composed reference
    builds a fresh composite every time it is called.

    Parameters
    ----------
    producer : Callable[[], Process]
        Function returning the successor process

    Examples
    --------
    >>> ref = Successor.of(identity())
    >>> ref() is identity()
    True
    """

    __slots__ = ('_producer',)

    def __init__(self, producer: Callable[[], 'Process']):
        if not callable(producer):
            raise TypeError(f"Producer must be callable, got {type(producer)}")
        self._producer = producer

    @classmethod
    def of(cls, process: 'Process') -> 'Successor':
        """Reference to an already existing process"""
        return cls(lambda: process)

    @classmethod
    def chain(
        cls,
        operator: Callable[['Process', 'Process'], 'Process'],
        first: 'Successor',
        second: 'Successor'
    ) -> 'Successor':
        """
        Reference to `operator(first(), second())`

        Neither operand is forced until the new reference itself is.
        """
        return cls(lambda: operator(first(), second()))

    def __call__(self) -> 'Process':
        return self._producer()

    def force(self) -> 'Process':
        """Produce the referenced process"""
        return self._producer()

    def __repr__(self) -> str:
        return f"Successor(at {id(self):#x})"


def force_all(references: Iterable[Successor]) -> List['Process']:
    """Force every reference of a cell"""
    return [reference() for reference in references]
