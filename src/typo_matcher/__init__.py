"""
Typo Matcher

A char-level text checker that:
- Aligns a compared text with an exemplary text in the best possible way
- Classifies every char as correct, extra or missing
- Records letter-case mistakes or normalizes letter cases on request
"""

__version__ = "1.0.0"
__author__ = "Typo Matcher Team"

from .config import MatchingConfig, Quantity, LetterCaseAction

from .models import (
    CharType,
    ClassifiedChar,
    ClassifiedText,
    Basis,
    Sequence,
    OptionalSequence,
    Subsequence,
)

# Alignment engine
from .char_positions import (
    fold_char,
    fold_text,
    extract_char_positions,
    count_common_chars,
)

from .lis import find_lis

from .candidates import generate_candidate_sequences

from .alignment import (
    select_best_alignment,
    calculate_basis,
    common_prefix_length,
    common_suffix_length,
)

# Classification
from .classifier import (
    classify,
    check_quick_compliance,
    check_exact_compliance,
    adding_correct_chars,
    adding_missing_chars,
    applying_configuration,
    make_uniform_text,
)

# Rendering and batch input
from .rendering import (
    render_markup,
    render_plain,
    summarize,
)

from .pairs_loader import (
    TextPair,
    PairsLoadError,
    load_pairs,
)

__all__ = [
    # Configuration
    "MatchingConfig",
    "Quantity",
    "LetterCaseAction",
    # Models
    "CharType",
    "ClassifiedChar",
    "ClassifiedText",
    "Basis",
    "Sequence",
    "OptionalSequence",
    "Subsequence",
    # Char positions
    "fold_char",
    "fold_text",
    "extract_char_positions",
    "count_common_chars",
    # Alignment engine
    "find_lis",
    "generate_candidate_sequences",
    "select_best_alignment",
    "calculate_basis",
    "common_prefix_length",
    "common_suffix_length",
    # Classification
    "classify",
    "check_quick_compliance",
    "check_exact_compliance",
    "adding_correct_chars",
    "adding_missing_chars",
    "applying_configuration",
    "make_uniform_text",
    # Rendering
    "render_markup",
    "render_plain",
    "summarize",
    # Batch input
    "TextPair",
    "PairsLoadError",
    "load_pairs",
]
