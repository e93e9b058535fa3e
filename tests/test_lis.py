"""
Tests for the longest increasing subsequence search.
"""

import pytest

from typo_matcher.lis import find_lis


class TestFindLis:
    """Tests for find_lis."""

    @pytest.mark.parametrize("sequence,expected", [
        ([], []),
        ([1], [1]),
        ([1, 0], [0]),
        ([1, 0, 2, 1, 3], [0, 1, 3]),
        ([2, 6, 0, 8, 1, 3, 1], [0, 1, 3]),
    ])
    def test_known_sequences(self, sequence, expected):
        assert find_lis(sequence) == expected

    def test_smallest_values_win_over_first_found(self):
        """[2, 6, 8] is found first, but [0, 1, 3] has smaller values."""
        assert find_lis([2, 6, 0, 8, 1, 3, 1]) != [2, 6, 8]

    def test_strictly_increasing(self):
        """Equal values never extend a subsequence."""
        assert find_lis([1, 1, 1]) == [1]
        assert find_lis([0, 2, 2, 3]) == [0, 2, 3]

    def test_equal_value_keeps_first_position(self):
        """A repeated value does not replace the tail it equals."""
        assert find_lis([2, 3, 0, 3]) == [2, 3]

    def test_decreasing_sequence(self):
        assert find_lis([5, 4, 3]) == [3]

    def test_rebuilds_subsequence_not_just_tails(self):
        assert find_lis([0, 2, 1, 3, 2, 4]) == [0, 1, 2, 4]

    def test_increasing_sequence_is_returned_whole(self):
        assert find_lis([0, 3, 4, 9]) == [0, 3, 4, 9]

    @pytest.mark.parametrize("sequence", [
        [1, 0, 2, 1, 3],
        [2, 6, 0, 8, 1, 3, 1],
        [9, 1, 8, 2, 7, 3],
    ])
    def test_idempotent(self, sequence):
        lis = find_lis(sequence)
        assert find_lis(lis) == lis

    def test_result_is_subsequence_of_input(self):
        sequence = [9, 1, 8, 2, 7, 3, 6, 4]
        lis = find_lis(sequence)
        iterator = iter(sequence)
        assert all(value in iterator for value in lis)
        assert len(lis) == 4
