"""
Char position index for the alignment engine.

Maps every case-folded char of a text to the ascending positions where it
occurs. Case folding is the only normalization applied; there is no Unicode
decomposition, and folding never changes the length of a text, so positions in
a folded text are positions in the original one.
"""

from collections import Counter


def fold_char(char: str) -> str:
    """
    Case-fold a single char without changing its length.

    Chars whose folding expands to several chars (e.g. "ß" -> "ss") fall back
    to `lower()`, and then to themselves.

    Args:
        char: A single char.

    Returns:
        The folded char.
    """
    folded = char.casefold()
    if len(folded) == 1:
        return folded
    lowered = char.lower()
    if len(lowered) == 1:
        return lowered
    return char


def fold_text(text: str) -> str:
    """Case-fold a text char by char, preserving its length."""
    return "".join(fold_char(char) for char in text)


def extract_char_positions(text: str) -> dict[str, list[int]]:
    """
    Extract the positions of every char of the text.

        >>> extract_char_positions("AbcaBC")
        {'a': [0, 3], 'b': [1, 4], 'c': [2, 5]}

    Args:
        text: Text to index.

    Returns:
        Mapping from folded char to its ascending positions.
    """
    positions: dict[str, list[int]] = {}
    for index, char in enumerate(text):
        positions.setdefault(fold_char(char), []).append(index)
    return positions


def count_common_chars(first: str, second: str) -> int:
    """
    Count chars the two texts have in common, ignoring order and letter case.

    This is the sum over chars of the smaller of the two occurrence counts.

    Args:
        first: First text.
        second: Second text.

    Returns:
        Number of common chars.
    """
    common = Counter(fold_text(first)) & Counter(fold_text(second))
    return sum(common.values())
