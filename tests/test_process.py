"""Tests for the Process abstraction."""

import pytest

from petrix.core import IndexOutOfRange, Process, RelationMatrix, identity, sink


def target_names(references):
    return sorted(reference().name for reference in references)


class TestProcess:
    def test_arities_follow_matrix(self):
        process = Process(RelationMatrix(3, 5), 'p')
        assert process.input_arity() == 3
        assert process.output_arity() == 5
        assert process.shape == (3, 5)

    def test_default_name(self):
        assert Process(RelationMatrix(1, 1)).name == 'unknown'

    def test_requires_relation_matrix(self):
        with pytest.raises(TypeError):
            Process([[None]], 'p')

    def test_lookup_out_of_range(self):
        with pytest.raises(IndexOutOfRange):
            identity().lookup(2, 0)

    def test_successors_force_references(self):
        assert identity().successors(0, 0) == [identity()]
        assert identity().successors(0, 1) == []

    def test_transitions_lists_defined_cells(self):
        assert [(i, j) for i, j, _ in identity().transitions()] == [(0, 0), (1, 1)]

    def test_identity_not_name_based(self):
        first = Process(RelationMatrix(1, 1), 'same')
        second = Process(RelationMatrix(1, 1), 'same')
        assert first != second
        assert first == first

    def test_repr_and_str(self):
        assert repr(identity()) == "Process(name='id', arity=2→2)"
        assert str(identity()) == 'id'


class TestReachable:
    """reachable(i) must accumulate every output channel of the row."""

    def test_accumulates_across_columns(self, make_process):
        a = Process(RelationMatrix(1, 1), 'a')
        b = Process(RelationMatrix(1, 1), 'b')
        c = Process(RelationMatrix(1, 1), 'c')
        p = make_process('p', 1, 3, {(0, 0): [a], (0, 1): [b], (0, 2): [c, a]})

        assert target_names(p.reachable(0)) == ['a', 'a', 'b', 'c']

    def test_skips_undefined_columns(self, make_process):
        a = Process(RelationMatrix(1, 1), 'a')
        p = make_process('p', 2, 3, {(1, 2): [a]})

        assert target_names(p.reachable(1)) == ['a']
        assert p.reachable(0) == frozenset()

    def test_row_of_primitive(self):
        assert len(identity().reachable(1)) == 1
        assert len(sink().reachable(0)) == 1

    def test_out_of_range_row(self):
        with pytest.raises(IndexOutOfRange):
            identity().reachable(5)
