"""Tests for the contract shared by all variants (connectivity/sequence.py)"""

from dataclasses import FrozenInstanceError

import pytest

from connectivity import (
    DynamicConnectivitySequence,
    ElementOutOfRangeError,
    QuickFind,
    QuickUnion,
    QuickUnionW,
    SimpleUnion,
)


class TestConstruction:
    def test_each_element_is_its_own_root(self, variant):
        uf = variant.of_size(6)
        assert uf.elems == (0, 1, 2, 3, 4, 5)
        assert [uf.find(e) for e in range(6)] == [0, 1, 2, 3, 4, 5]

    def test_size(self, variant):
        uf = variant.of_size(4)
        assert uf.size == 4
        assert len(uf) == 4

    def test_empty(self, variant):
        uf = variant.of_size(0)
        assert uf.elems == ()
        assert uf.size == 0

    def test_negative_size(self, variant):
        with pytest.raises(ValueError, match="non-negative"):
            variant.of_size(-1)

    def test_parent_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            QuickUnion((0, 5))

    @pytest.mark.parametrize(
        "elems", [(1, 0), (0, 2, 3, 1), (1, 2, 3, 4, 2)], ids=["pair", "loop", "tail"]
    )
    def test_cycle_is_rejected(self, elems):
        with pytest.raises(ValueError, match="cycle"):
            QuickUnion(elems)

    def test_cycle_is_rejected_for_weighted(self):
        with pytest.raises(ValueError, match="cycle"):
            QuickUnionW((1, 0), (2, 2))

    def test_shared_roots_are_accepted(self):
        uf = QuickUnion((1, 3, 1, 3, 3))
        assert [uf.find(e) for e in range(5)] == [3, 3, 3, 3, 3]

    def test_quick_find_must_be_flat(self):
        with pytest.raises(ValueError, match="not a root"):
            QuickFind((1, 2, 2, 3))

    def test_quick_find_flat_array(self):
        uf = QuickFind((2, 2, 2, 3))
        assert uf.connected(0, 1)
        assert uf.union(0, 3).connected(0, 1)

    def test_weights_must_match_tree_sizes(self):
        with pytest.raises(ValueError, match="tree size"):
            QuickUnionW((1, 1, 2), (1, 1, 1))

    def test_matching_weights_are_accepted(self):
        uf = QuickUnionW((1, 1, 2), (7, 2, 1))
        assert uf.weight(0) == 2

    def test_weighted_starts_with_unit_weights(self):
        assert QuickUnionW.of_size(3).weights == (1, 1, 1)

    def test_weighted_length_mismatch(self):
        with pytest.raises(ValueError, match="weights"):
            QuickUnionW((0, 1), (1,))

    def test_abstract_classes(self):
        with pytest.raises(TypeError):
            DynamicConnectivitySequence()
        with pytest.raises(TypeError):
            SimpleUnion((0,))


class TestFind:
    def test_follows_parent_pointers(self):
        uf = QuickUnion((1, 2, 2, 3))
        assert uf.find(0) == 2
        assert uf.find(1) == 2
        assert uf.find(3) == 3

    def test_deep_chain_does_not_recurse(self):
        """A degenerate tree deeper than the recursion limit."""
        n = 5000
        uf = QuickUnion(tuple(range(1, n)) + (n - 1,))
        assert uf.find(0) == n - 1

    @pytest.mark.parametrize("element", [-1, 5, 100])
    def test_out_of_range(self, variant, element):
        uf = variant.of_size(5)
        with pytest.raises(ElementOutOfRangeError, match="out of range"):
            uf.find(element)

    def test_out_of_range_is_an_index_error(self, variant):
        with pytest.raises(IndexError):
            variant.of_size(3).find(3)

    def test_error_attributes(self):
        with pytest.raises(ElementOutOfRangeError) as info:
            QuickFind.of_size(3).find(7)
        assert info.value.element == 7
        assert info.value.size == 3


class TestConnected:
    def test_reflexive_after_construction(self, variant):
        uf = variant.of_size(4)
        assert all(uf.connected(e, e) for e in range(4))

    def test_singletons_are_disconnected(self, variant):
        uf = variant.of_size(3)
        assert not uf.connected(0, 1)
        assert not uf.connected(1, 2)

    @pytest.mark.parametrize("p, q", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_range(self, variant, p, q):
        with pytest.raises(ElementOutOfRangeError):
            variant.of_size(3).connected(p, q)


class TestUnion:
    def test_union_connects(self, variant):
        uf = variant.of_size(4).union(0, 3)
        assert uf.connected(0, 3)
        assert uf.connected(3, 0)
        assert not uf.connected(0, 1)

    @pytest.mark.parametrize("p, q", [(-1, 0), (0, -1), (4, 0), (0, 4)])
    def test_out_of_range(self, variant, p, q):
        uf = variant.of_size(4)
        with pytest.raises(ElementOutOfRangeError):
            uf.union(p, q)
        assert uf == variant.of_size(4)

    def test_previous_generation_is_unchanged(self, variant):
        before = variant.of_size(4)
        after = before.union(0, 1).union(2, 3)
        assert before == variant.of_size(4)
        assert not before.connected(0, 1)
        assert after.connected(0, 1)
        assert after is not before

    def test_union_returns_same_variant(self, variant):
        assert type(variant.of_size(2).union(0, 1)) is variant


class TestValueSemantics:
    def test_frozen(self, variant):
        uf = variant.of_size(2)
        with pytest.raises(FrozenInstanceError):
            uf.elems = (1, 1)

    def test_equality_by_value(self, variant):
        assert variant.of_size(3).union(0, 2) == variant.of_size(3).union(0, 2)

    def test_variants_are_not_equal(self):
        assert QuickFind.of_size(3) != QuickUnion.of_size(3)

    def test_hashable(self, variant):
        generations = {variant.of_size(3), variant.of_size(3), variant.of_size(3).union(0, 1)}
        assert len(generations) == 2
