"""
Data models for Typo Matcher.

This module defines the core data structures shared by the alignment engine
and the classifier.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# An ordered list of indices into the exemplary text.
Sequence = list[int]

# One slot per compared char: the exemplary index it was assigned to, or None
# when the char does not occur in the exemplary text at all.
OptionalSequence = list[Optional[int]]

# A strictly increasing list of exemplary indices.
Subsequence = list[int]


class CharType(Enum):
    """Kind of a classified char."""
    CORRECT = "correct"
    MISSING = "missing"
    EXTRA = "extra"
    # Reserved for a later refinement pass over the classified text
    SWAPPED = "swapped"
    MISSPELLED = "misspelled"


@dataclass(frozen=True)
class ClassifiedChar:
    """A char of the compared or exemplary text together with its kind.

    Attributes:
        value: The char itself.
        kind: What the char is relative to the exemplary text.
        letter_case_correct: Whether a correct char has the exemplary letter
            case. Only set when letter cases are compared as is.
        expected_char: The char that should stand here, for misspelled chars.
    """
    value: str
    kind: CharType
    letter_case_correct: Optional[bool] = None
    expected_char: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the char."""
        if len(self.value) != 1:
            raise ValueError(f"value must be a single char, got {self.value!r}")
        if self.kind == CharType.MISSPELLED and self.expected_char is None:
            raise ValueError("A misspelled char needs expected_char")

    @property
    def is_correct(self) -> bool:
        return self.kind == CharType.CORRECT

    @property
    def is_missing(self) -> bool:
        return self.kind == CharType.MISSING

    @property
    def is_extra(self) -> bool:
        return self.kind == CharType.EXTRA

    @property
    def has_wrong_letter_case(self) -> bool:
        """Check if the char was recorded with a wrong letter case."""
        return self.letter_case_correct is False

    @property
    def belongs_to_compared(self) -> bool:
        """Check if the char was typed, i.e. comes from the compared text."""
        return self.kind != CharType.MISSING

    @property
    def belongs_to_exemplary(self) -> bool:
        """Check if the char is part of the exemplary text reconstruction."""
        return self.kind in (CharType.CORRECT, CharType.MISSING)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "value": self.value,
            "kind": self.kind.value,
            "letter_case_correct": self.letter_case_correct,
            "expected_char": self.expected_char,
        }


# A text where each char has a kind.
ClassifiedText = list[ClassifiedChar]


@dataclass(frozen=True)
class Basis:
    """The optimal alignment between a compared and an exemplary text.

    Attributes:
        exemplary_sequence: `[0, 1, ..., len(exemplary) - 1]`.
        sequence: One slot per compared char, holding the exemplary index the
            char was assigned to, or None.
        subsequence: The accepted alignment, a strictly increasing subset of
            the non-None values of `sequence` in the same order.
        missing_elements: Exemplary indices absent from `subsequence`,
            ascending.
    """
    exemplary_sequence: Sequence
    sequence: OptionalSequence
    subsequence: Subsequence
    missing_elements: Sequence = field(default_factory=list)

    @classmethod
    def from_alignment(
        cls,
        exemplary_length: int,
        sequence: OptionalSequence,
        subsequence: Subsequence,
    ) -> "Basis":
        """Build a basis, deriving the exemplary sequence and missing elements."""
        matched = set(subsequence)
        exemplary_sequence = list(range(exemplary_length))
        return cls(
            exemplary_sequence=exemplary_sequence,
            sequence=sequence,
            subsequence=subsequence,
            missing_elements=[i for i in exemplary_sequence if i not in matched],
        )

    @property
    def matched_count(self) -> int:
        """Number of correct chars."""
        return len(self.subsequence)

    @property
    def wrong_count(self) -> int:
        """Number of compared chars left unmatched."""
        return len(self.sequence) - len(self.subsequence)
