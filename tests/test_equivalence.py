"""Tests for structural profiles and equivalence."""

import numpy as np
import pytest

from petrix.core import (
    Process,
    RelationMatrix,
    empty_place,
    equivalent,
    full_place,
    identity,
    relation_profile,
    same_profile,
    seq,
    signature,
    sink,
    source,
    xor_merge,
)


class TestRelationProfile:
    def test_primitive_profile(self):
        np.testing.assert_array_equal(relation_profile(xor_merge()), [[1, 0], [0, 1], [0, 1], [0, 0]])

    def test_composite_profile(self):
        np.testing.assert_array_equal(relation_profile(seq(source(), sink())), [[2]])

    def test_same_profile_checks_shape(self):
        assert not same_profile(Process(RelationMatrix(1, 2)), Process(RelationMatrix(2, 1)))


class TestSignature:
    def test_depth_zero_is_arity(self):
        assert signature(xor_merge(), depth=0) == ((4, 2),)

    def test_depth_one(self):
        assert signature(identity()) == (
            (2, 2),
            ((0, 0, (((2, 2),),)), (1, 1, (((2, 2),),))),
        )

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            signature(identity(), depth=-1)

    def test_hashable(self):
        assert hash(signature(empty_place(), depth=3)) == hash(signature(empty_place(), depth=3))


class TestEquivalent:
    def test_names_are_ignored(self, make_process):
        wire = make_process('wire', 2, 2, {(0, 0): ['self'], (1, 1): ['self']})
        assert wire.name != identity().name
        assert equivalent(wire, identity(), depth=3)

    def test_places_differ(self):
        assert not equivalent(empty_place(), full_place())

    def test_difference_below_first_step(self, make_process):
        # Same one-step shape as the empty place, but input 1 leads to e
        lazy = make_process('lazy', 2, 2, {(0, 0): ['self'], (1, 0): [empty_place()]})
        assert equivalent(lazy, empty_place(), depth=1)
        assert not equivalent(lazy, empty_place(), depth=2)
