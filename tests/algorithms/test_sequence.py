"""Tests for the generic sequence algorithms."""
from fractions import Fraction

import numpy as np
import pytest

from seqsafe.algorithms import (
    combine,
    combine_value,
    filter_out,
    filter_out_occ,
    filter_out_occ_seq,
    filter_out_seq,
    repeat,
    split,
    split_occ,
    split_occ_seq,
    split_seq,
    subordinate,
)
from seqsafe.containers import BoundedArray, BoundedList


def join(segments, pattern):
    """Rejoin split segments with a pattern between them."""
    result = []
    for i, segment in enumerate(segments):
        if i:
            result.extend(pattern)
        result.extend(segment)
    return result


class TestSubordinate:
    def test_range(self, one_to_ten):
        assert subordinate(one_to_ten, 2, 7) == [3, 4, 5, 6, 7]

    def test_empty_range(self, one_to_ten):
        assert subordinate(one_to_ten, 4, 4) == []

    def test_result_is_independent(self, one_to_ten):
        part = subordinate(one_to_ten, 0, 3)
        part[0] = 100
        assert one_to_ten[0] == 1

    def test_invalid_range_is_not_clamped(self, one_to_ten):
        """Out-of-range bounds trip the debug assertion instead of clamping."""
        with pytest.raises(AssertionError):
            subordinate(one_to_ten, 5, 20)
        with pytest.raises(AssertionError):
            subordinate(one_to_ten, 6, 5)


class TestCombine:
    def test_sequences(self, one_to_five):
        assert combine(one_to_five, [6, 7, 8, 9, 10]) == list(range(1, 11))

    def test_length_and_halves(self, one_to_five, one_to_ten):
        combined = combine(one_to_five, one_to_ten)
        assert len(combined) == len(one_to_five) + len(one_to_ten)
        assert combined[:5] == one_to_five
        assert combined[5:] == one_to_ten

    def test_value(self, one_to_five):
        assert combine_value(one_to_five, 6) == [1, 2, 3, 4, 5, 6]

    def test_inputs_not_mutated(self, one_to_five):
        combine(one_to_five, [6])
        assert one_to_five == [1, 2, 3, 4, 5]

    def test_mixed_containers(self, one_to_ten_array):
        """Any sequence shapes can be combined."""
        combined = combine(BoundedList([0]), one_to_ten_array)
        assert combined == list(range(11))


class TestFilterOut:
    def test_filter_out_seq(self, one_to_ten):
        assert filter_out_seq(one_to_ten, [4, 5, 6]) == [1, 2, 3, 7, 8, 9, 10]

    def test_filter_out_seq_non_overlapping(self):
        """A match consumes its length, so overlaps are removed once."""
        assert filter_out_seq([1, 1, 1, 2], [1, 1]) == [1, 2]

    def test_filter_out_seq_empty_pattern(self, one_to_ten):
        """An empty pattern never matches."""
        assert filter_out_seq(one_to_ten, []) == one_to_ten

    def test_filter_out_seq_empty_sequence(self):
        assert filter_out_seq([], [1]) == []

    def test_filter_out_occ(self, one_to_ten):
        assert filter_out_occ(one_to_ten, [1, 3, 5, 7, 9]) == [2, 4, 6, 8, 10]

    def test_filter_out_occ_idempotent(self, one_to_ten):
        once = filter_out_occ(one_to_ten, [2, 3, 9])
        assert filter_out_occ(once, [2, 3, 9]) == once

    def test_filter_out_occ_seq(self):
        container = [1, 2, 3, 4, 4, 5, 6, 7, 7, 8, 9, 10]
        assert filter_out_occ_seq(container, [[4, 4], [7, 7]]) == [1, 2, 3, 5, 6, 8, 9, 10]

    def test_filter_out_occ_seq_is_order_sensitive(self):
        """Earlier removals can expose later occurrences."""
        container = [1, 2, 9, 3]
        assert filter_out_occ_seq(container, [[9], [2, 3]]) == [1]
        assert filter_out_occ_seq(container, [[2, 3], [9]]) == [1, 2, 3]

    def test_filter_out(self, one_to_ten):
        assert filter_out(one_to_ten, 3) == [1, 2, 4, 5, 6, 7, 8, 9, 10]


class TestRepeat:
    def test_integral(self, one_to_five):
        assert repeat(one_to_five, 3) == one_to_five * 3

    def test_three_copies_equal_combine(self, one_to_five):
        expected = combine(combine(one_to_five, one_to_five), one_to_five)
        result = repeat(one_to_five, 3)
        assert len(result) == 3 * len(one_to_five)
        assert result == expected

    def test_zero_and_negative(self, one_to_five):
        assert repeat(one_to_five, 0) == []
        assert repeat(one_to_five, -4) == []
        assert repeat(one_to_five, -2.5) == []

    def test_fractional_truncates(self, one_to_five):
        """3.6 copies: three whole copies plus floor(0.6 * 5) = 3 elements."""
        assert repeat(one_to_five, 3.6) == [1, 2, 3, 4, 5, 1, 2, 3, 4, 5, 1, 2, 3, 4, 5, 1, 2, 3]

    def test_fractional_below_one(self, one_to_five):
        """Truncation, not rounding: 0.39 * 5 = 1.95 keeps one element."""
        assert repeat(one_to_five, 0.39) == [1]

    def test_numpy_counts(self, one_to_five):
        assert repeat(one_to_five, np.int32(2)) == one_to_five * 2
        assert repeat(one_to_five, np.float32(1.5)) == one_to_five + [1, 2]
        assert repeat(one_to_five, np.longdouble(1.5)) == one_to_five + [1, 2]

    def test_fraction_count(self, one_to_five):
        assert repeat(one_to_five, Fraction(3, 2)) == one_to_five + [1, 2]

    def test_non_real_count_raises(self, one_to_five):
        with pytest.raises(TypeError, match="real number"):
            repeat(one_to_five, "3")

    def test_non_finite_count_raises(self, one_to_five):
        with pytest.raises(ValueError, match="must be finite"):
            repeat(one_to_five, float("inf"))

    def test_numpy_sequence(self):
        arr = BoundedArray([1, 2])
        assert repeat(arr, 2) == [1, 2, 1, 2]


class TestSplitSeq:
    def test_split(self, one_to_ten):
        assert split_seq(one_to_ten, [5, 6, 7]) == [[1, 2, 3, 4], [8, 9, 10]]

    def test_leading_and_trailing_matches(self):
        assert split_seq([0, 1, 2, 0], [0]) == [[], [1, 2], []]

    def test_adjacent_matches(self):
        assert split_seq([1, 0, 0, 2], [0]) == [[1], [], [2]]

    def test_no_match(self, one_to_ten):
        assert split_seq(one_to_ten, [11]) == [one_to_ten]

    def test_empty_sequence(self):
        assert split_seq([], [1]) == []

    def test_empty_pattern(self, one_to_ten):
        assert split_seq(one_to_ten, []) == [one_to_ten]

    def test_join_roundtrip(self):
        """Joining the segments with the pattern restores the input."""
        data = [3, 1, 2, 4, 1, 2, 1, 2, 5]
        pattern = [1, 2]
        assert join(split_seq(data, pattern), pattern) == data

    def test_split_value(self, one_to_ten):
        assert split(one_to_ten, 7) == [[1, 2, 3, 4, 5, 6], [8, 9, 10]]


class TestSplitOcc:
    def test_split(self, one_to_ten):
        assert split_occ(one_to_ten, [4, 8]) == [[1, 2, 3], [5, 6, 7], [9, 10]]

    def test_adjacent_delimiters(self):
        assert split_occ([1, 0, 9, 2], [0, 9]) == [[1], [], [2]]

    def test_leading_delimiter(self):
        assert split_occ([0, 1], [0]) == [[], [1]]

    def test_trailing_delimiter_has_no_empty_segment(self):
        assert split_occ([1, 2, 0], [0]) == [[1, 2]]

    def test_empty_sequence(self):
        assert split_occ([], [0]) == []

    def test_no_values(self, one_to_ten):
        assert split_occ(one_to_ten, []) == [one_to_ten]


class TestSplitOccSeq:
    def test_split(self):
        container = [1, 2, 3, 3, 4, 5, 6, 7, 8, 8, 9, 10]
        assert split_occ_seq(container, [[3, 3], [8, 8]]) == [[1, 2], [4, 5, 6, 7], [9, 10]]

    def test_earliest_match_wins(self):
        assert split_occ_seq([1, 2, 3, 4, 5], [[4], [2]]) == [[1], [3], [5]]

    def test_tie_goes_to_first_pattern(self):
        """Both patterns match at the same position; the first listed is consumed."""
        data = [1, 2, 3, 4, 5]
        assert split_occ_seq(data, [[2], [2, 3]]) == [[1], [3, 4, 5]]
        assert split_occ_seq(data, [[2, 3], [2]]) == [[1], [4, 5]]

    def test_match_at_end_has_no_trailing_segment(self):
        assert split_occ_seq([1, 2, 3], [[2, 3]]) == [[1]]

    def test_empty_patterns_ignored(self):
        assert split_occ_seq([1, 2, 3], [[], [2]]) == [[1], [3]]

    def test_empty_sequence(self):
        assert split_occ_seq([], [[1]]) == []
