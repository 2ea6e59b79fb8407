"""
Delimiter stripping for Dart string literals.

Only the outer quotes are removed; escape sequences and adjacent-string
concatenation are left untouched.

Usage Examples:
    >>> strip_delimiters('"Hello"')
    'Hello'
    >>> strip_delimiters("r'$notInterpolated'")
    '$notInterpolated'
    >>> strip_delimiters("x")
    'x'
"""

from __future__ import annotations

from typing import NamedTuple


class DelimiterStyle(NamedTuple):
    """A recognised literal form: opening text and closing text."""

    name: str
    opening: str
    closing: str

    def wrap(self, text: str) -> str:
        """Wrap text in this style's delimiters."""
        return f"{self.opening}{text}{self.closing}"


# Checked in order; the first style whose delimiters fit wins.
DELIMITER_STYLES: tuple[DelimiterStyle, ...] = (
    DelimiterStyle("triple_double", '"""', '"""'),
    DelimiterStyle("triple_single", "'''", "'''"),
    DelimiterStyle("raw_triple_double", 'r"""', '"""'),
    DelimiterStyle("raw_triple_single", "r'''", "'''"),
    DelimiterStyle("raw_double", 'r"', '"'),
    DelimiterStyle("raw_single", "r'", "'"),
    DelimiterStyle("double", '"', '"'),
    DelimiterStyle("single", "'", "'"),
)


def detect_style(text: str) -> DelimiterStyle | None:
    """
    Find the delimiter style of a raw literal.

    Args:
        text: Literal source text including its delimiters

    Returns:
        The matching style, or None if the text is not a recognised literal
    """
    if len(text) < 2:
        return None

    for style in DELIMITER_STYLES:
        # Opening and closing must not overlap
        if len(text) < len(style.opening) + len(style.closing):
            continue
        if text.startswith(style.opening) and text.endswith(style.closing):
            return style
    return None


def strip_delimiters(text: str) -> str:
    """
    Remove the literal delimiters from raw source text.

    Text that is too short or does not match a recognised form is returned
    unchanged.

    Args:
        text: Literal source text including its delimiters

    Returns:
        The literal's interior text
    """
    style = detect_style(text)
    if style is None:
        return text
    return text[len(style.opening) : len(text) - len(style.closing)]
