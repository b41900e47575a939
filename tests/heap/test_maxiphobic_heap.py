"""Tests for `maxigraph.heap.MaxiphobicHeap`."""

import random
from operator import itemgetter

import pytest

from maxigraph.errors import EmptyStructureError
from maxigraph.heap import MaxiphobicHeap


def _weight(node):
    return 0 if node is None else node.weight


def _assert_well_formed(heap):
    """Check weight bookkeeping, heap order and the maxiphobic balance bound."""
    key = heap.ordering() or (lambda x: x)
    count = 0
    for node in heap._nodes():
        count += 1
        assert node.weight == 1 + _weight(node.left) + _weight(node.right)
        for child in (node.left, node.right):
            if child is not None:
                assert not key(child.element) < key(node.element)
        # The kept (left) child is the heaviest of the three merge candidates
        assert 3 * _weight(node.left) >= node.weight - 1
    assert count == heap.size()


def _drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.minimum())
        heap.delete_minimum()
    return out


class _CountingKey:
    def __init__(self):
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return x


class TestEmptyHeap:
    def test_fresh_heap_is_empty(self):
        heap = MaxiphobicHeap()
        assert heap.is_empty()
        assert heap.size() == 0
        assert len(heap) == 0
        assert not heap

    def test_minimum_on_empty_raises(self):
        with pytest.raises(EmptyStructureError):
            MaxiphobicHeap().minimum()

    def test_delete_minimum_on_empty_raises(self):
        with pytest.raises(EmptyStructureError):
            MaxiphobicHeap().delete_minimum()

    def test_empty_error_is_index_error(self):
        with pytest.raises(IndexError):
            MaxiphobicHeap().minimum()

    def test_raises_again_after_draining(self):
        heap = MaxiphobicHeap.of(1)
        heap.delete_minimum()
        with pytest.raises(EmptyStructureError):
            heap.delete_minimum()
        assert heap.size() == 0


class TestInsertDelete:
    def test_insert_and_minimum(self):
        heap = MaxiphobicHeap()
        for x in [5, 3, 8, 1, 9]:
            heap.insert(x)
        assert heap.minimum() == 1
        assert heap.size() == 5

    def test_drain_yields_non_decreasing_order_with_duplicates(self):
        rng = random.Random(7)
        values = [rng.randint(0, 20) for _ in range(300)]
        heap = MaxiphobicHeap()
        for v in values:
            heap.insert(v)
        assert _drain(heap) == sorted(values)

    def test_size_tracks_inserts_minus_deletes(self):
        rng = random.Random(42)
        heap = MaxiphobicHeap()
        expected = 0
        for _ in range(2000):
            if rng.random() < 0.6 or heap.is_empty():
                heap.insert(rng.randint(-100, 100))
                expected += 1
            else:
                heap.delete_minimum()
                expected -= 1
            assert heap.size() == expected
        _assert_well_formed(heap)

    def test_structure_after_every_operation(self):
        rng = random.Random(3)
        heap = MaxiphobicHeap()
        for _ in range(400):
            if rng.random() < 0.7 or heap.is_empty():
                heap.insert(rng.randint(0, 50))
            else:
                heap.delete_minimum()
            _assert_well_formed(heap)

    def test_ascending_inserts_stay_balanced(self):
        heap = MaxiphobicHeap()
        for x in range(500):
            heap.insert(x)
        _assert_well_formed(heap)
        assert _drain(heap) == list(range(500))

    def test_clear(self):
        heap = MaxiphobicHeap.of(3, 1, 2)
        heap.clear()
        assert heap.is_empty()
        assert heap.size() == 0
        heap.insert(4)
        assert heap.minimum() == 4


class TestOrdering:
    def test_natural_ordering_is_none(self):
        assert MaxiphobicHeap().ordering() is None

    def test_key_function_reverses_order(self):
        neg = lambda x: -x  # noqa: E731
        heap = MaxiphobicHeap.of(4, 9, 1, 7, key=neg)
        assert heap.ordering() is neg
        assert _drain(heap) == [9, 7, 4, 1]

    def test_key_on_tuples(self):
        heap = MaxiphobicHeap(key=itemgetter(1))
        for item in [("a", 3), ("b", 1), ("c", 2)]:
            heap.insert(item)
        assert [name for name, _ in _drain(heap)] == ["b", "c", "a"]

    def test_ties_keep_existing_root(self):
        heap = MaxiphobicHeap(key=itemgetter(0))
        heap.insert((1, "first"))
        heap.insert((1, "second"))
        assert heap.minimum() == (1, "first")


class TestBulkConstruction:
    def test_of_and_from_iterable(self):
        assert _drain(MaxiphobicHeap.of(3, 1, 2)) == [1, 2, 3]
        assert _drain(MaxiphobicHeap.from_iterable(iter([5, 4, 6]))) == [4, 5, 6]

    def test_empty_bulk(self):
        assert MaxiphobicHeap.of().is_empty()
        assert MaxiphobicHeap.from_iterable([]).is_empty()

    def test_bulk_structure(self):
        rng = random.Random(11)
        values = [rng.random() for _ in range(1000)]
        heap = MaxiphobicHeap.from_iterable(values)
        assert heap.size() == 1000
        _assert_well_formed(heap)
        assert _drain(heap) == sorted(values)

    def test_bulk_build_uses_linear_comparisons(self):
        n = 2**12
        rng = random.Random(5)
        values = [rng.randint(0, n) for _ in range(n)]
        key = _CountingKey()
        MaxiphobicHeap.from_iterable(values, key=key)
        # Two key evaluations per comparison
        assert key.calls < 10 * n

    def test_two_element_shape(self):
        heap = MaxiphobicHeap.of(1, 2)
        assert repr(heap) == "MaxiphobicHeap(Node(Node(null, 2, null), 1, null))"


class TestMerge:
    def test_merge_combines_and_empties_other(self):
        a = MaxiphobicHeap.of(5, 1, 9)
        b = MaxiphobicHeap.of(4, 2, 8, 0)
        a.merge(b)
        assert a.size() == 7
        assert b.is_empty()
        _assert_well_formed(a)
        assert _drain(a) == [0, 1, 2, 4, 5, 8, 9]

    def test_merge_with_empty(self):
        a = MaxiphobicHeap.of(2, 1)
        a.merge(MaxiphobicHeap())
        assert a.size() == 2
        empty = MaxiphobicHeap()
        empty.merge(a)
        assert empty.size() == 2
        assert a.is_empty()

    def test_merge_rejects_self(self):
        a = MaxiphobicHeap.of(1)
        with pytest.raises(ValueError):
            a.merge(a)

    def test_merge_rejects_different_ordering(self):
        a = MaxiphobicHeap.of(1, key=lambda x: x)
        b = MaxiphobicHeap.of(2)
        with pytest.raises(ValueError):
            a.merge(b)
        assert b.size() == 1

    def test_repeated_random_merges_stay_well_formed(self):
        rng = random.Random(99)
        heaps = [
            MaxiphobicHeap.from_iterable(
                [rng.randint(0, 99) for _ in range(rng.randint(0, 30))]
            )
            for _ in range(20)
        ]
        total = sum(h.size() for h in heaps)
        acc = MaxiphobicHeap()
        for h in heaps:
            acc.merge(h)
            _assert_well_formed(acc)
        assert acc.size() == total


class TestCopyAndRepr:
    def test_copy_is_independent(self):
        heap = MaxiphobicHeap.of(3, 1, 2)
        clone = heap.copy()
        clone.delete_minimum()
        clone.insert(0)
        assert _drain(heap) == [1, 2, 3]
        assert _drain(clone) == [0, 2, 3]

    def test_copy_preserves_shape_and_ordering(self):
        neg = lambda x: -x  # noqa: E731
        heap = MaxiphobicHeap.from_iterable(range(50), key=neg)
        clone = heap.copy()
        assert repr(clone) == repr(heap)
        assert clone.ordering() is neg
        _assert_well_formed(clone)

    def test_copy_of_empty(self):
        assert MaxiphobicHeap().copy().is_empty()

    def test_repr(self):
        assert repr(MaxiphobicHeap()) == "MaxiphobicHeap(null)"
        assert repr(MaxiphobicHeap.of("x")) == "MaxiphobicHeap(Node(null, 'x', null))"
