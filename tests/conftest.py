"""Shared helpers for the petrix tests."""

import pytest

from petrix.core import Process, RelationMatrix, singleton


@pytest.fixture
def make_process():
    """
    Build an ad hoc process.

    `cells` maps (i, j) to the list of processes the cell leads to; the
    string 'self' stands for the process being built.
    """
    def build(name, inputs, outputs, cells):
        matrix = RelationMatrix(inputs, outputs)
        process = Process(matrix, name)
        for (i, j), targets in cells.items():
            references = []
            for target in targets:
                references.extend(singleton(process if target == 'self' else target))
            matrix.set(i, j, references)
        matrix.freeze()
        return process

    return build
