# -*- coding: utf-8 -*-
"""
Centralized configuration for Typo Matcher.

This module provides the configuration dataclasses that control how a
compared text is checked against an exemplary text: the letter-case policy
and the optional quantity thresholds used by the compliance gates.
"""

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union


# Type alias for the letter-case policy
# - "compare_as_is": Letters are left unchanged; a case mismatch in a correct
#   position is recorded on the char but does not change its kind.
# - "capitalized" / "uppercase" / "lowercase": The output is led to the given
#   case after classification. No case mismatch is ever recorded.
LetterCaseAction = Literal["compare_as_is", "capitalized", "uppercase", "lowercase"]

LETTER_CASE_ACTIONS = ("compare_as_is", "capitalized", "uppercase", "lowercase")

# Longest text the CLI and the HTTP API pass to the alignment search. The search
# grows combinatorially with repeated chars, so outer surfaces cap their input.
DEFAULT_MAX_TEXT_LENGTH = 12


@dataclass
class Quantity:
    """
    A threshold expressed either as an exact count or as a share of a length.

    Attributes:
        count: Exact number of chars.
        coefficient: Share of the text length, from 0.0 to 1.0.

    Exactly one of the two must be set.
    """

    count: Optional[int] = None
    coefficient: Optional[float] = None

    def __post_init__(self):
        """Validate that exactly one form is used and that it is in range."""
        if (self.count is None) == (self.coefficient is None):
            raise ValueError("Quantity needs exactly one of count or coefficient")
        if self.count is not None and self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.coefficient is not None and not 0.0 <= self.coefficient <= 1.0:
            raise ValueError(
                f"coefficient must be between 0.0 and 1.0, got {self.coefficient}"
            )

    @classmethod
    def exact(cls, count: int) -> "Quantity":
        """Create a quantity of exactly `count` chars."""
        return cls(count=count)

    @classmethod
    def percent(cls, value: float) -> "Quantity":
        """Create a quantity of `value` percent (0-100) of a text length."""
        if not 0 <= value <= 100:
            raise ValueError(f"percent must be between 0 and 100, got {value}")
        return cls(coefficient=value / 100)

    @classmethod
    def parse(cls, value: Union[str, int, "Quantity"]) -> "Quantity":
        """
        Parse a quantity from user input.

        Args:
            value: "50%" for a percentage, "3" or 3 for an exact count.

        Returns:
            Parsed Quantity.

        Raises:
            ValueError: If the value cannot be interpreted.
        """
        if isinstance(value, Quantity):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid quantity: {value!r}")
        if isinstance(value, int):
            return cls.exact(value)

        text = str(value).strip()
        if text.endswith("%"):
            try:
                return cls.percent(float(text[:-1]))
            except ValueError as e:
                raise ValueError(f"Invalid percentage quantity: {value!r} ({e})")
        try:
            return cls.exact(int(text))
        except ValueError:
            raise ValueError(
                f"Invalid quantity: {value!r}. Use a count like '3' or a percentage like '50%'"
            )

    def calculate(self, length: int) -> int:
        """Resolve the quantity to a char count for a text of `length` chars."""
        if self.count is not None:
            return self.count
        # Rounded first so that e.g. 29% of 100 does not truncate to 28
        return int(round(length * self.coefficient, 9))

    def __str__(self) -> str:
        if self.count is not None:
            return str(self.count)
        return f"{self.coefficient * 100:g}%"


@dataclass
class MatchingConfig:
    """
    Configuration a classified text should conform to.

    Attributes:
        letter_case_action: The action applied to letter cases:
            - None: Letters are compared case-insensitively and left unchanged.
              A case mismatch is not a mistake and is not recorded.
            - "compare_as_is": Letters are left unchanged, and a case mismatch
              in a correct position is recorded via `letter_case_correct`.
            - "capitalized": The output is led to capitalized writing, i.e. the
              first char in uppercase and the remaining ones in lowercase.
            - "uppercase": The output is led to capital letters.
            - "lowercase": The output is led to small letters.

        required_matched_chars: Minimum quantity of correct chars, measured
            against the exemplary text length. The text is rejected (returned
            fully extra) when fewer chars match.

        acceptable_wrong_chars: Maximum quantity of wrong chars, measured
            against the compared text length. The text is rejected when more
            compared chars are left unmatched.

    Thresholds also let the classifier skip the alignment search early, so
    setting them saves time on long texts.
    """

    letter_case_action: Optional[LetterCaseAction] = None

    required_matched_chars: Optional[Quantity] = None
    acceptable_wrong_chars: Optional[Quantity] = None

    @property
    def records_letter_case(self) -> bool:
        """Check if case mismatches of correct chars should be recorded."""
        return self.letter_case_action == "compare_as_is"

    @property
    def normalizes_letter_case(self) -> bool:
        """Check if the output is led to a particular letter case."""
        return self.letter_case_action in ("capitalized", "uppercase", "lowercase")

    @property
    def has_thresholds(self) -> bool:
        """Check if any compliance threshold is configured."""
        return (
            self.required_matched_chars is not None
            or self.acceptable_wrong_chars is not None
        )

    def __post_init__(self):
        """Validate configuration values."""
        if (
            self.letter_case_action is not None
            and self.letter_case_action not in LETTER_CASE_ACTIONS
        ):
            raise ValueError(
                f"letter_case_action must be one of {', '.join(LETTER_CASE_ACTIONS)} or None, "
                f"got '{self.letter_case_action}'"
            )
        for name in ("required_matched_chars", "acceptable_wrong_chars"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Quantity):
                setattr(self, name, Quantity.parse(value))

    @classmethod
    def strict(cls, **overrides) -> "MatchingConfig":
        """Create config that checks letter cases and needs half the text right.

        Strict mode:
        - Letter cases are compared as is and mismatches are recorded
        - At least 50% of the exemplary chars must be matched
        - At most 50% of the compared chars may be wrong

        Args:
            **overrides: Override any config values

        Returns:
            MatchingConfig with strict defaults
        """
        defaults = {
            "letter_case_action": "compare_as_is",
            "required_matched_chars": Quantity.percent(50),
            "acceptable_wrong_chars": Quantity.percent(50),
        }
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def lenient(cls, **overrides) -> "MatchingConfig":
        """Create config that ignores letter cases and has no thresholds.

        Args:
            **overrides: Override any config values

        Returns:
            MatchingConfig with lenient defaults
        """
        defaults = {
            "letter_case_action": "lowercase",
            "required_matched_chars": None,
            "acceptable_wrong_chars": None,
        }
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MatchingConfig":
        """Create config from a plain mapping (CLI options, API payloads).

        Unknown keys are ignored. Empty values are treated as unset.

        Args:
            data: Mapping with optional letter_case_action,
                required_matched_chars and acceptable_wrong_chars keys.

        Returns:
            MatchingConfig built from the mapping

        Raises:
            ValueError: If a value is invalid.
        """
        data = data or {}

        def _quantity(key: str) -> Optional[Quantity]:
            value = data.get(key)
            if value is None or value == "":
                return None
            return Quantity.parse(value)

        return cls(
            letter_case_action=data.get("letter_case_action") or None,
            required_matched_chars=_quantity("required_matched_chars"),
            acceptable_wrong_chars=_quantity("acceptable_wrong_chars"),
        )
