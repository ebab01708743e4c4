"""Tests for the diagnostic rendering."""

from petrix import format_relation
from petrix.core import empty_place, feed, identity, seq, sink, source, xor_split
from petrix.utils import NO_TRANSITION, channel_label, format_cell


class TestLabels:
    def test_binary_by_default(self):
        assert channel_label(0) == '0'
        assert channel_label(3) == '11'

    def test_decimal(self):
        assert channel_label(3, binary=False) == '3'


class TestFormatCell:
    def test_undefined(self):
        assert format_cell(None) == NO_TRANSITION

    def test_single_successor(self):
        assert format_cell(empty_place().lookup(1, 0)) == '{f}'

    def test_every_successor_is_listed(self):
        assert format_cell(feed(sink()).lookup(0, 0)) == '{snk, snk}'

    def test_names_are_sorted(self, make_process):
        b = make_process('b', 1, 1, {})
        a = make_process('a', 1, 1, {})
        mixed = make_process('mixed', 1, 1, {(0, 0): [b, a]})
        assert format_cell(mixed.lookup(0, 0)) == '{a, b}'


class TestFormatRelation:
    def test_identity(self):
        assert format_relation(identity()) == '\t0\t1\n0\t{id}\t*\n1\t*\t{id}'

    def test_binary_header(self):
        header = format_relation(xor_split()).split('\n')[0]
        assert header == '\t0\t1\t10\t11'

    def test_decimal_header(self):
        header = format_relation(xor_split(), binary_labels=False).split('\n')[0]
        assert header == '\t0\t1\t2\t3'

    def test_composite_successors(self):
        lines = seq(source(), sink()).render().split('\n')
        assert lines == ['\t0', '0\t{src;snk, src;snk}']

    def test_one_line_per_input(self):
        assert len(format_relation(xor_split()).split('\n')) == 3
