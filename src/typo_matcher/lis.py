"""
Longest increasing subsequence search.
"""

from bisect import bisect_left

from .models import Sequence, Subsequence


def find_lis(sequence: Sequence) -> Subsequence:
    """
    Find the longest strictly increasing subsequence of the given sequence.

        >>> find_lis([2, 6, 0, 8, 1, 3, 1])
        [0, 1, 3]

    The example sequence has two such subsequences, `[2, 6, 8]` and
    `[0, 1, 3]`; the one with the smallest values is chosen.

    Patience sorting: for each length seen so far, the smallest last value
    reachable is kept, along with the position it came from. An element equal
    to an already kept last value replaces nothing, so the first seen position
    wins: `[2, 3, 0, 3]` gives `[2, 3]`, not `[0, 3]`, because the second 3
    does not displace the first. Back-links from every element to the tail it
    extended allow the subsequence itself to be rebuilt.

    Args:
        sequence: Integers to search.

    Returns:
        The subsequence, by value.
    """
    tail_values: list[int] = []
    tail_positions: list[int] = []
    previous: list[int] = [-1] * len(sequence)

    for position, value in enumerate(sequence):
        length_index = bisect_left(tail_values, value)

        if length_index < len(tail_values) and tail_values[length_index] == value:
            continue

        if length_index > 0:
            previous[position] = tail_positions[length_index - 1]

        if length_index == len(tail_values):
            tail_values.append(value)
            tail_positions.append(position)
        else:
            tail_values[length_index] = value
            tail_positions[length_index] = position

    lis: Subsequence = []
    position = tail_positions[-1] if tail_positions else -1
    while position >= 0:
        lis.append(sequence[position])
        position = previous[position]
    lis.reverse()

    return lis
