"""
Alignment selection and basis calculation.

The basis is the optimal alignment between a compared and an exemplary text:
which compared chars are matched to which exemplary positions. It is found by
running the longest increasing subsequence search over every candidate
sequence and keeping the best result:

1. The longest subsequence wins (the most matched chars)
2. Among equally long ones, the smallest sum of values wins (the earliest
   exemplary positions, leaving room for later matches)
3. On an exact tie, the first generated candidate wins

Common prefixes and suffixes are always part of the optimal alignment, so they
are trimmed before the search and added back afterwards.
"""

import logging
from typing import Iterable, Optional

from .candidates import generate_candidate_sequences
from .char_positions import fold_text
from .lis import find_lis
from .models import Basis, OptionalSequence, Subsequence

logger = logging.getLogger(__name__)


def select_best_alignment(
    pairs: Iterable[tuple[OptionalSequence, Subsequence]],
) -> tuple[OptionalSequence, Subsequence]:
    """
    Select the best (sequence, subsequence) pair.

    Pairs are processed in order. A running maximum length is tracked, and the
    kept pairs are dropped as soon as a longer subsequence shows up. The
    survivor with the smallest sum of subsequence values is returned.

    Args:
        pairs: Candidate sequences with their longest increasing subsequences.

    Returns:
        The best pair, or `([], [])` if there are no pairs.
    """
    max_length = -1
    survivors: list[tuple[OptionalSequence, Subsequence]] = []

    for sequence, subsequence in pairs:
        length = len(subsequence)
        if length > max_length:
            max_length = length
            survivors = [(sequence, subsequence)]
        elif length == max_length:
            survivors.append((sequence, subsequence))

    if not survivors:
        return [], []

    # min() keeps the first of equal sums
    return min(survivors, key=lambda pair: sum(pair[1]))


def common_prefix_length(first: str, second: str) -> int:
    """Length of the common prefix of two texts."""
    length = 0
    for a, b in zip(first, second):
        if a != b:
            break
        length += 1
    return length


def common_suffix_length(first: str, second: str, limit: Optional[int] = None) -> int:
    """
    Length of the common suffix of two texts.

    Args:
        first: First text.
        second: Second text.
        limit: Maximum length to report, so the suffix does not overlap a
            prefix that was already taken.

    Returns:
        Suffix length.
    """
    if limit is None:
        limit = min(len(first), len(second))

    length = 0
    while (
        length < limit
        and first[len(first) - 1 - length] == second[len(second) - 1 - length]
    ):
        length += 1
    return length


def _search_alignment(compared: str, exemplary: str) -> tuple[OptionalSequence, Subsequence]:
    """Run the candidate search and the LIS selection on (trimmed) texts."""
    candidate_count = 0

    def _pairs():
        nonlocal candidate_count
        for sequence in generate_candidate_sequences(compared, exemplary):
            candidate_count += 1
            lis = find_lis([element for element in sequence if element is not None])
            yield sequence, lis

    sequence, subsequence = select_best_alignment(_pairs())
    logger.debug(
        f"Searched {candidate_count} candidates for {len(compared)}x{len(exemplary)} chars, "
        f"matched {len(subsequence)}"
    )
    return sequence, subsequence


def calculate_basis(compared: str, exemplary: str) -> Basis:
    """
    Calculate the basis for the compared text relying on the exemplary one.

        >>> basis = calculate_basis("hola", "hello")
        >>> basis.sequence, basis.subsequence, basis.missing_elements
        ([0, 4, 2, None], [0, 2], [1, 3, 4])

    Letter cases are ignored. Identical texts get the identity alignment
    without any search.

    Args:
        compared: Compared text.
        exemplary: Exemplary text.

    Returns:
        Basis covering both full texts.
    """
    folded_compared = fold_text(compared)
    folded_exemplary = fold_text(exemplary)

    if folded_compared == folded_exemplary:
        identity = list(range(len(exemplary)))
        return Basis.from_alignment(len(exemplary), list(identity), identity)

    prefix = common_prefix_length(folded_compared, folded_exemplary)
    suffix = common_suffix_length(
        folded_compared,
        folded_exemplary,
        limit=min(len(folded_compared), len(folded_exemplary)) - prefix,
    )

    compared_middle = folded_compared[prefix:len(folded_compared) - suffix]
    exemplary_middle = folded_exemplary[prefix:len(folded_exemplary) - suffix]
    logger.debug(
        f"Trimmed prefix of {prefix} and suffix of {suffix} chars, "
        f"searching {compared_middle!r} against {exemplary_middle!r}"
    )

    middle_sequence, middle_subsequence = _search_alignment(compared_middle, exemplary_middle)

    suffix_start = len(exemplary) - suffix
    head = list(range(prefix))
    tail = list(range(suffix_start, len(exemplary)))

    sequence: OptionalSequence = head + [
        element + prefix if element is not None else None
        for element in middle_sequence
    ] + tail
    subsequence: Subsequence = head + [
        element + prefix for element in middle_subsequence
    ] + tail

    return Basis.from_alignment(len(exemplary), sequence, subsequence)
