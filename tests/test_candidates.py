"""
Tests for candidate sequence generation.
"""

from typo_matcher.candidates import generate_candidate_sequences


def _candidates(compared: str, exemplary: str) -> list:
    return list(generate_candidate_sequences(compared, exemplary))


class TestGenerateCandidateSequences:
    """Tests for generate_candidate_sequences."""

    def test_empty_compared_gives_single_empty_candidate(self):
        assert _candidates("", "abc") == [[]]

    def test_absent_chars_are_always_none(self):
        assert _candidates("xyz", "abc") == [[None, None, None]]

    def test_each_position_of_a_single_char(self):
        assert _candidates("ola", "ello") == [[3, 1, None], [3, 2, None]]

    def test_letter_case_is_ignored(self):
        assert _candidates("A", "a") == [[0]]

    def test_repeated_chars_take_increasing_positions(self):
        assert _candidates("aa", "aa") == [[0, 1], [1, None], [None, 0], [None, 1]]

    def test_repeated_char_without_position_left_is_none(self):
        assert _candidates("aa", "a") == [[0, None], [None, 0]]

    def test_earlier_occurrence_can_leave_position_to_later_one(self):
        """The second 'a' can only align after 'b' if the first one gives way."""
        assert _candidates("abac", "bad") == [
            [1, 0, None, None],
            [None, 0, 1, None],
        ]

    def test_no_reused_positions(self):
        """Values in a candidate never repeat."""
        for candidate in generate_candidate_sequences("abcabca", "aabbcca"):
            values = [value for value in candidate if value is not None]
            assert len(values) == len(set(values))

    def test_every_candidate_covers_every_compared_char(self):
        for candidate in generate_candidate_sequences("banana", "ananas"):
            assert len(candidate) == 6

    def test_is_lazy(self):
        """Candidates are produced one at a time."""
        generator = generate_candidate_sequences("abcdefgh" * 2, "hgfedcba" * 2)
        assert next(generator) is not None
