"""Tests for the operator front end (Seq and Text)."""
import numpy as np
import pytest

from seqsafe import Seq, Text
from seqsafe.algorithms import combine, filter_out_seq, repeat, split_seq
from seqsafe.formatting import Formatted


class TestSeq:
    def test_add_sequence(self):
        assert Seq([1, 2]) + [3, 4] == [1, 2, 3, 4]

    def test_add_value(self):
        result = Seq([1, 2]) + 3
        assert isinstance(result, Seq)
        assert result == [1, 2, 3]

    def test_radd_sequence(self):
        assert (0, 1) + Seq([2]) == [0, 1, 2]

    def test_add_string_is_a_single_value(self):
        assert Seq(["a"]) + "bc" == ["a", "bc"]

    def test_sub_pattern_and_value(self, one_to_ten):
        assert Seq(one_to_ten) - [4, 5, 6] == filter_out_seq(one_to_ten, [4, 5, 6])
        assert Seq([1, 2, 1]) - 1 == [2]

    def test_mul(self, one_to_five):
        assert Seq(one_to_five) * 3.6 == repeat(one_to_five, 3.6)
        assert 2 * Seq([7]) == [7, 7]

    def test_truediv(self, one_to_ten):
        parts = Seq(one_to_ten) / [5, 6, 7]
        assert parts == split_seq(one_to_ten, [5, 6, 7])
        assert all(isinstance(part, Seq) for part in parts)
        assert Seq(one_to_ten) / 7 == [[1, 2, 3, 4, 5, 6], [8, 9, 10]]

    def test_numpy_operand(self, one_to_five):
        assert Seq(one_to_five) + np.array([6, 7]) == combine(one_to_five, [6, 7])

    def test_compound_assignment_rebinds(self):
        """``+=`` builds a new Seq; other references keep the old value."""
        original = Seq([1, 2])
        alias = original
        original += [3]
        original -= 1
        original *= 2
        assert original == [2, 3, 2, 3]
        assert alias == [1, 2]

    def test_slice_keeps_type(self):
        assert isinstance(Seq([1, 2, 3])[1:], Seq)

    def test_format(self):
        assert f"{Seq([1, 2, 3]):e'-'}" == "1-2-3"
        assert f"{Seq([1, 2])}" == "1, 2"
        assert format(Seq(["a", "b"]), "") == format(Formatted(["a", "b"]), "")

    def test_repr(self):
        assert repr(Seq([1])) == "Seq([1])"


class TestText:
    def test_add(self):
        result = Text("ab") + "cd"
        assert isinstance(result, Text)
        assert result == "abcd"
        assert isinstance("x" + Text("y"), Text)

    def test_sub(self):
        assert Text("a--b--c") - "--" == "abc"

    def test_mul(self):
        assert Text("abcd") * 2.5 == "abcdabcdab"
        assert 2 * Text("ab") == "abab"

    def test_truediv(self):
        parts = Text("a, b, c") / ", "
        assert parts == ["a", "b", "c"]
        assert all(isinstance(part, Text) for part in parts)

    def test_compound_assignment(self):
        text = Text("aXbX")
        text -= "X"
        text *= 2
        assert text == "abab"
        assert isinstance(text, Text)

    def test_non_string_operand(self):
        with pytest.raises(TypeError):
            Text("ab") - 1
