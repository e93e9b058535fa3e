"""
Classification of a compared text relying on an exemplary text.

This module forms the classified text: every char of the compared text is
correct or extra, and every exemplary char that was not typed is inserted as
missing. Only these three kinds are produced here; swapped and misspelled chars
are left to a later refinement pass.

Reading the correct and missing chars of a result in order gives the exemplary
text back.
"""

import logging
from typing import Optional

from .alignment import calculate_basis
from .char_positions import count_common_chars
from .config import MatchingConfig
from .models import Basis, CharType, ClassifiedChar, ClassifiedText

logger = logging.getLogger(__name__)


def classify(
    compared: str,
    exemplary: str,
    config: Optional[MatchingConfig] = None,
) -> ClassifiedText:
    """
    Classify the compared text relying on the exemplary text.

        >>> [(c.value, c.kind.value) for c in classify("hola", "hello")]
        [('h', 'correct'), ('e', 'missing'), ('o', 'extra'), ('l', 'correct'),
         ('l', 'missing'), ('o', 'missing'), ('a', 'extra')]

    The classification is performed only if at least one char is correct and
    the configured thresholds are met; otherwise the compared text is returned
    fully extra. An empty compared text gives a fully missing exemplary text.

    Long texts with many repeated chars make the alignment search slow.
    Thresholds in `config` let inputs be rejected before the search runs.

    Args:
        compared: Text to check.
        exemplary: Reference text.
        config: Matching configuration. Defaults to MatchingConfig().

    Returns:
        List of ClassifiedChar.
    """
    config = config or MatchingConfig()

    if not exemplary:
        return make_uniform_text(compared, CharType.EXTRA, config)
    if not compared:
        return make_uniform_text(exemplary, CharType.MISSING, config)

    if not check_quick_compliance(compared, exemplary, config):
        logger.debug("Quick compliance failed, returning extra text")
        return make_uniform_text(compared, CharType.EXTRA, config)

    basis = calculate_basis(compared, exemplary)

    if not check_exact_compliance(basis, config):
        logger.debug("Exact compliance failed, returning extra text")
        return make_uniform_text(compared, CharType.EXTRA, config)

    classified = make_uniform_text(compared, CharType.EXTRA, MatchingConfig())
    classified = adding_correct_chars(classified, exemplary, basis, config)
    classified = adding_missing_chars(classified, exemplary, basis)

    return applying_configuration(classified, config)


def check_quick_compliance(compared: str, exemplary: str, config: MatchingConfig) -> bool:
    """
    Check for quick compliance to the given configuration.

    Only the presence of chars is checked, not their order, so the result is
    an upper bound: a text can pass here and still fail the exact check, but
    never the other way round.

    Returns:
        True if the compared text possibly satisfies all the conditions.
    """
    common_count = count_common_chars(compared, exemplary)

    if common_count == 0:
        return False

    if config.required_matched_chars is not None:
        required = config.required_matched_chars.calculate(len(exemplary))
        if required > common_count:
            return False

    if config.acceptable_wrong_chars is not None:
        acceptable = config.acceptable_wrong_chars.calculate(len(compared))
        if len(compared) - common_count > acceptable:
            return False

    return True


def check_exact_compliance(basis: Basis, config: MatchingConfig) -> bool:
    """
    Check for exact compliance to the given configuration.

    Needs the calculated basis, so it runs after the alignment search, but the
    result is accurate.

    Returns:
        True if the basis satisfies all the conditions.
    """
    if not basis.subsequence:
        return False

    if config.required_matched_chars is not None:
        required = config.required_matched_chars.calculate(len(basis.exemplary_sequence))
        if required > basis.matched_count:
            return False

    if config.acceptable_wrong_chars is not None:
        acceptable = config.acceptable_wrong_chars.calculate(len(basis.sequence))
        if basis.wrong_count > acceptable:
            return False

    return True


def adding_correct_chars(
    classified: ClassifiedText,
    exemplary: str,
    basis: Basis,
    config: MatchingConfig,
) -> ClassifiedText:
    """
    Return the classified text with correct chars marked.

    Wherever a slot of `basis.sequence` holds the next subsequence element, the
    char at that position turns from extra to correct. Values, count and order
    of the chars stay the same.

    The classified text must be the extra-only compared text.
    """
    classified = list(classified)
    sub_index = 0

    for index, element in enumerate(basis.sequence):
        if sub_index >= len(basis.subsequence):
            break
        if element != basis.subsequence[sub_index]:
            continue

        letter_case_correct = None
        if config.records_letter_case:
            letter_case_correct = exemplary[element] == classified[index].value

        classified[index] = ClassifiedChar(
            classified[index].value,
            CharType.CORRECT,
            letter_case_correct=letter_case_correct,
        )
        sub_index += 1

    return classified


def adding_missing_chars(
    classified: ClassifiedText,
    exemplary: str,
    basis: Basis,
) -> ClassifiedText:
    """
    Return the classified text with missing chars inserted.

    Missing chars are inserted right after the correct char that precedes them
    in exemplary order (or at the very start), so extra chars typed between
    two correct ones follow the missing chars between them. The existing chars
    are not changed, but the count grows, so the basis no longer lines up with
    the result.
    """
    subsequence = basis.subsequence
    missing = basis.missing_elements

    def _missing_chars(lower: int, upper: Optional[int]) -> list[ClassifiedChar]:
        return [
            ClassifiedChar(exemplary[index], CharType.MISSING)
            for index in missing
            if lower < index and (upper is None or index < upper)
        ]

    first = subsequence[0] if subsequence else None
    result = _missing_chars(-1, first)

    correct_index = 0
    for char in classified:
        result.append(char)
        if char.kind != CharType.CORRECT:
            continue

        lower = subsequence[correct_index]
        correct_index += 1
        upper = subsequence[correct_index] if correct_index < len(subsequence) else None
        result.extend(_missing_chars(lower, upper))

    return result


def applying_configuration(classified: ClassifiedText, config: MatchingConfig) -> ClassifiedText:
    """
    Return the classified text with the letter-case action applied.

    Kinds, order and count of the chars are not changed; only values can be.
    """
    if not config.normalizes_letter_case:
        return classified

    values = _lead_letter_case([char.value for char in classified], config.letter_case_action)
    return [
        ClassifiedChar(
            value,
            char.kind,
            letter_case_correct=char.letter_case_correct,
            expected_char=char.expected_char,
        )
        for value, char in zip(values, classified)
    ]


def make_uniform_text(text: str, kind: CharType, config: MatchingConfig) -> ClassifiedText:
    """
    Make a classified text where all chars are of the same kind.

        >>> config = MatchingConfig(letter_case_action="capitalized")
        >>> [c.value for c in make_uniform_text("abc", CharType.CORRECT, config)]
        ['A', 'b', 'c']
    """
    values = list(text)
    if config.normalizes_letter_case:
        values = _lead_letter_case(values, config.letter_case_action)
    return [ClassifiedChar(value, kind) for value in values]


def _lead_letter_case(values: list[str], action: str) -> list[str]:
    """Change the case of each char, keeping chars whose mapping would expand."""

    def _convert(char: str, upper: bool) -> str:
        converted = char.upper() if upper else char.lower()
        return converted if len(converted) == 1 else char

    if action == "uppercase":
        return [_convert(char, True) for char in values]
    if action == "lowercase":
        return [_convert(char, False) for char in values]
    # capitalized
    return [_convert(char, index == 0) for index, char in enumerate(values)]
