"""
Diagnostic rendering of processes

Tab-separated dump of a process's one-step relation: a header row of output
channel labels, then one row per input channel. A cell lists the names of
its successors, or NO_TRANSITION when undefined. Rendering forces the
references of every defined cell, i.e. it builds one step of the unrolling.
"""

from typing import FrozenSet, Optional

from ..core.lazy import Successor
from ..core.process import Process


NO_TRANSITION = '*'


def channel_label(index: int, binary: bool = True) -> str:
    """Label of a channel: base 2 by default, base 10 otherwise"""
    return format(index, 'b') if binary else str(index)


def format_cell(cell: Optional[FrozenSet[Successor]]) -> str:
    """
    Render a single cell

    Examples
    --------
    >>> format_cell(None)
    '*'
    >>> format_cell(empty_place().lookup(1, 0))
    '{f}'
    """
    if cell is None:
        return NO_TRANSITION
    names = sorted(reference().name for reference in cell)
    return '{' + ', '.join(names) + '}'


def format_relation(process: Process, binary_labels: bool = True) -> str:
    """
    Render the one-step relation of a process

    Parameters
    ----------
    process : Process
        Process to render
    binary_labels : bool
        Label channels in base 2 (default) or base 10

    Returns
    -------
    text : str
        One header line plus one line per input channel

    Examples
    --------
    >>> format_relation(identity()).split('\\n')
    ['\\t0\\t1', '0\\t{id}\\t*', '1\\t*\\t{id}']
    """
    rows, cols = process.shape

    header = [''] + [channel_label(j, binary_labels) for j in range(cols)]
    lines = ['\t'.join(header)]

    for i in range(rows):
        line = [channel_label(i, binary_labels)]
        line.extend(format_cell(process.lookup(i, j)) for j in range(cols))
        lines.append('\t'.join(line))

    return '\n'.join(lines)
