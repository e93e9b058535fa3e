"""
Candidate alignment generation.

For every char of the compared text, the exemplary positions holding the same
(case-folded) char are candidates. This module enumerates every order-preserving
assignment of compared chars to those positions:

- Repeated occurrences of a char must take strictly increasing positions.
  Reusing an earlier position for a later occurrence never improves the
  alignment and would blow up the search.
- A char that does not occur in the exemplary text is always None.
- An occurrence that has no position left after its earlier occurrences is None.
- An occurrence followed by another occurrence of the same char may also be
  left None, so that the later occurrence can take a position it needs
  (compared "abac" against "bad" matches the second "a", not the first).

The search is exhaustive, so the count of candidates grows combinatorially with
the number of repeated chars. Callers must bound the input length.
"""

from typing import Iterator

from .char_positions import extract_char_positions, fold_text
from .models import OptionalSequence


def generate_candidate_sequences(
    compared: str,
    exemplary: str,
) -> Iterator[OptionalSequence]:
    """
    Generate every candidate sequence for the compared text.

        >>> list(generate_candidate_sequences("ola", "ello"))
        [[3, 1, None], [3, 2, None]]

    Candidates come in a fixed order: positions are tried ascending, and None
    is tried after every position. The search runs on an explicit stack where
    each branch carries its own snapshot of the last position used per char.

    Args:
        compared: Compared text.
        exemplary: Exemplary text.

    Yields:
        Sequences with one slot per compared char.
    """
    folded = fold_text(compared)
    char_positions = extract_char_positions(exemplary)

    candidates = [char_positions.get(char, []) for char in folded]
    repeated_later = [char in folded[index + 1:] for index, char in enumerate(folded)]

    # (assigned slots, last used position per char)
    stack: list[tuple[tuple, dict[str, int]]] = [((), {})]

    while stack:
        assigned, last_used = stack.pop()
        index = len(assigned)

        if index == len(folded):
            yield list(assigned)
            continue

        char = folded[index]
        floor = last_used.get(char, -1)
        options = [position for position in candidates[index] if position > floor]

        branches = [
            (assigned + (position,), {**last_used, char: position})
            for position in options
        ]
        if not options or repeated_later[index]:
            branches.append((assigned + (None,), last_used))

        # Reversed so the first option is explored first
        stack.extend(reversed(branches))
