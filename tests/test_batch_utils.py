"""Tests for batch_utils.py — chunking, ordering, edge cases."""

import itertools

import pytest
from chunkwise.batch_utils import chunk_list


class TestChunkList:
    def test_even_split(self):
        result = chunk_list([1, 2, 3, 4], 2)
        assert result == [[1, 2], [3, 4]]

    def test_uneven_split(self):
        result = chunk_list([1, 2, 3, 4, 5], 2)
        assert result == [[1, 2], [3, 4], [5]]

    def test_batch_size_larger_than_list(self):
        result = chunk_list([1, 2], 10)
        assert result == [[1, 2]]

    def test_single_item(self):
        result = chunk_list([42], 1)
        assert result == [[42]]

    def test_empty_list(self):
        result = chunk_list([], 5)
        assert result == []

    def test_batch_size_one(self):
        result = chunk_list([1, 2, 3], 1)
        assert result == [[1], [2], [3]]

    def test_batch_size_zero_clamped(self):
        result = chunk_list([1, 2, 3], 0)
        assert result == [[1], [2], [3]]

    def test_negative_batch_size_clamped(self):
        result = chunk_list([1, 2], -4)
        assert result == [[1], [2]]

    def test_fractional_batch_size_truncated(self):
        result = chunk_list([1, 2, 3, 4, 5], 2.5)
        assert result == [[1, 2], [3, 4], [5]]

    def test_tuple_input_yields_lists(self):
        result = chunk_list(("a", "b", "c"), 2)
        assert result == [["a", "b"], ["c"]]

    def test_does_not_mutate_input(self):
        items = [1, 2, 3]
        chunk_list(items, 2)
        assert items == [1, 2, 3]

    def test_large_input_keeps_every_item(self):
        result = chunk_list(list(range(5000)), 500)
        assert len(result) == 10
        assert result[-1][-1] == 4999


# ── Round trip ───────────────────────────────────────────────────────────────

class TestRoundTrip:
    @pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 11])
    def test_concatenation_restores_input(self, size):
        items = list(range(10))
        chunks = chunk_list(items, size)
        assert list(itertools.chain.from_iterable(chunks)) == items

    @pytest.mark.parametrize("size", [1, 3, 4])
    def test_only_last_chunk_is_short(self, size):
        chunks = chunk_list(list(range(10)), size)
        for chunk in chunks[:-1]:
            assert len(chunk) == size
        assert 1 <= len(chunks[-1]) <= size
