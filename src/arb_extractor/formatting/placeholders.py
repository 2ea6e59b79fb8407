"""
Conversion of Dart string interpolation into ARB placeholders.

A literal such as ``Hello ${user.name}, you have $count items`` becomes the
ARB value ``Hello {name}, you have {count} items``. Placeholder names are
derived from the interpolated expression and numbered when the same name
appears more than once.

Usage Examples:
    >>> convert("Total: ${order.totalPrice}").value
    'Total: {totalPrice}'
    >>> convert("Cancel").suggested_key
    'cancel'
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple

SIGIL = "$"
DEFAULT_PARAM_NAME = "param"
DIGIT_PREFIX = "var"
SUGGESTED_KEY_MAX_LENGTH = 20

_IDENTIFIER_START = frozenset(string.ascii_letters + "_")
_IDENTIFIER_PART = frozenset(string.ascii_letters + string.digits + "_")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_.")
_SUGGESTABLE_KEY = re.compile(r"[a-zA-Z_]+")


class SegmentKind(Enum):
    """Kind of segment produced by the interpolation lexer."""

    TEXT = "text"
    BRACED_EXPRESSION = "braced_expression"
    BARE_IDENTIFIER = "bare_identifier"


class Segment(NamedTuple):
    """
    A slice of the scanned text.

    ``expression`` holds the interpolated source (without the sigil and
    braces) for expression segments and is empty for plain text.
    """

    kind: SegmentKind
    text: str
    start: int
    end: int
    expression: str = ""


class ConversionResult(NamedTuple):
    """Outcome of converting a literal to ARB form."""

    value: str
    suggested_key: str


def _match_braced(text: str, pos: int) -> int:
    """Return the end of a ``${...}`` form at pos, or -1."""
    if not text.startswith("{", pos + 1):
        return -1
    close = text.find("}", pos + 2)
    # At least one character between the braces
    if close <= pos + 2:
        return -1
    return close + 1


def _match_bare(text: str, pos: int) -> int:
    """Return the end of a ``$identifier`` form at pos, or -1."""
    cursor = pos + 1
    if cursor >= len(text) or text[cursor] not in _IDENTIFIER_START:
        return -1
    cursor += 1
    while cursor < len(text) and text[cursor] in _IDENTIFIER_PART:
        cursor += 1
    return cursor


def scan_interpolations(text: str) -> Iterator[Segment]:
    """
    Split text into plain and interpolated segments, left to right.

    At every sigil the braced form is tried first, then the bare identifier
    form. A sigil that starts neither form stays part of the plain text.

    Args:
        text: Literal content without delimiters

    Yields:
        Segments covering the whole input in order
    """
    text_start = 0
    pos = text.find(SIGIL)

    while pos != -1:
        kind = SegmentKind.BRACED_EXPRESSION
        end = _match_braced(text, pos)
        if end == -1:
            kind = SegmentKind.BARE_IDENTIFIER
            end = _match_bare(text, pos)

        if end == -1:
            pos = text.find(SIGIL, pos + 1)
            continue

        if pos > text_start:
            yield Segment(SegmentKind.TEXT, text[text_start:pos], text_start, pos)

        if kind is SegmentKind.BRACED_EXPRESSION:
            expression = text[pos + 2 : end - 1]
        else:
            expression = text[pos + 1 : end]
        yield Segment(kind, text[pos:end], pos, end, expression)

        text_start = end
        pos = text.find(SIGIL, end)

    if text_start < len(text):
        yield Segment(SegmentKind.TEXT, text[text_start:], text_start, len(text))


def generate_param_name(expression: str) -> str:
    """
    Derive a placeholder name from an interpolated expression.

    ``user.firstName`` gives ``firstName``, ``1st`` gives ``var1st`` and an
    expression with no usable characters gives ``param``.

    Args:
        expression: Raw expression text

    Returns:
        Placeholder name with its first character lower-cased
    """
    cleaned = "".join(char for char in expression if char in _NAME_CHARS)
    if not cleaned:
        cleaned = DEFAULT_PARAM_NAME
    if cleaned[0].isdigit():
        cleaned = DIGIT_PREFIX + cleaned

    # Empty dot segments are skipped and the last segment gets its own digit
    # prefix, so the result is always a non-empty identifier.
    segments = [segment for segment in cleaned.split(".") if segment]
    name = segments[-1] if segments else DEFAULT_PARAM_NAME
    if name[0].isdigit():
        name = DIGIT_PREFIX + name

    return name[0].lower() + name[1:]


def suggest_key(value: str) -> str:
    """Suggest a key for short, purely alphabetic values; empty otherwise."""
    if len(value) < SUGGESTED_KEY_MAX_LENGTH and _SUGGESTABLE_KEY.fullmatch(value):
        return value.lower()
    return ""


def convert(text: str) -> ConversionResult:
    """
    Convert literal content to an ARB value and suggest a key.

    Args:
        text: Literal content without delimiters

    Returns:
        ConversionResult with the placeholder value and suggested key (empty
        when no key can be suggested)
    """
    name_counts: dict[str, int] = {}
    parts: list[str] = []

    for segment in scan_interpolations(text):
        if segment.kind is SegmentKind.TEXT:
            parts.append(segment.text)
            continue

        base_name = generate_param_name(segment.expression)
        count = name_counts.get(base_name, 0)
        name_counts[base_name] = count + 1
        name = base_name if count == 0 else f"{base_name}{count + 1}"
        parts.append(f"{{{name}}}")

    value = "".join(parts)
    return ConversionResult(value=value, suggested_key=suggest_key(value))
