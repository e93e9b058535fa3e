"""
Rendering of classified texts.

This module turns a classified text into something a person can read:
- Rich console markup with a style per char kind
- A plain bracketed form for logs and terminals without colors
- A summary dictionary with counts per kind
"""

from itertools import groupby

from rich.markup import escape

from .models import CharType, ClassifiedText

# Rich styles per char kind
KIND_STYLES = {
    CharType.CORRECT: "green",
    CharType.MISSING: "bold green underline",
    CharType.EXTRA: "red strike",
    CharType.SWAPPED: "magenta",
    CharType.MISSPELLED: "magenta underline",
}
WRONG_LETTER_CASE_STYLE = "yellow"

# Plain-text brackets per char kind, correct chars are not bracketed
PLAIN_BRACKETS = {
    CharType.MISSING: ("(", ")"),
    CharType.EXTRA: ("[", "]"),
    CharType.SWAPPED: ("<", ">"),
    CharType.MISSPELLED: ("{", "}"),
}


def render_markup(classified: ClassifiedText) -> str:
    """
    Render a classified text as Rich console markup.

    Consecutive chars of the same style share one markup span. Correct chars
    with a wrong letter case are highlighted separately.

    Args:
        classified: Classified text.

    Returns:
        String with Rich markup tags.
    """

    def _style(char) -> str:
        if char.kind == CharType.CORRECT and char.has_wrong_letter_case:
            return WRONG_LETTER_CASE_STYLE
        return KIND_STYLES[char.kind]

    parts = []
    for style, chars in groupby(classified, key=_style):
        text = escape("".join(char.value for char in chars))
        parts.append(f"[{style}]{text}[/{style}]")

    return "".join(parts)


def render_plain(classified: ClassifiedText) -> str:
    """
    Render a classified text as plain text.

        >>> render_plain(classify("hola", "hello"))
        'h(e)[o]l(lo)[a]'

    Missing runs are wrapped in (), extra runs in [], swapped runs in <> and
    misspelled runs in {}.
    """
    parts = []
    for kind, chars in groupby(classified, key=lambda char: char.kind):
        text = "".join(char.value for char in chars)
        if kind in PLAIN_BRACKETS:
            opening, closing = PLAIN_BRACKETS[kind]
            text = f"{opening}{text}{closing}"
        parts.append(text)

    return "".join(parts)


def summarize(classified: ClassifiedText) -> dict:
    """
    Generate a summary of a classified text.

    Args:
        classified: Classified text.

    Returns:
        Dictionary with counts per kind, the letter-case mistake count,
        whether the compared text was exact, and both texts rebuilt from the
        classification.
    """
    counts = {kind.value: 0 for kind in CharType}
    for char in classified:
        counts[char.kind.value] += 1

    letter_case_mistakes = sum(1 for char in classified if char.has_wrong_letter_case)
    mistakes = len(classified) - counts[CharType.CORRECT.value]

    return {
        **counts,
        "total": len(classified),
        "letter_case_mistakes": letter_case_mistakes,
        "is_exact": mistakes == 0 and letter_case_mistakes == 0,
        "compared": "".join(char.value for char in classified if char.belongs_to_compared),
        "exemplary": "".join(char.value for char in classified if char.belongs_to_exemplary),
    }
