"""
Batch extraction helpers.

A batch starts with every literal of a file turned into an entry whose key
is pre-filled from the lookup file when the value is already known. The user
then edits keys, the entries are validated and written additively, and the
literals are replaced in the source text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.exceptions import EntryValidationError
from ..formatting.placeholders import convert
from ..resources.file_set import ResourceFileSet
from .models import ExtractionEntry, SourceLiteral

logger = logging.getLogger(__name__)


def accessor_expression(class_name: str, key: str) -> str:
    """Dart code that reads key from the localizations class."""
    return f"{class_name}.of(context).{key}"


def prepare_entries(
    literals: Iterable[SourceLiteral], file_set: ResourceFileSet
) -> list[ExtractionEntry]:
    """
    Convert literals into batch entries.

    Empty literals are skipped. Keys are taken from the lookup scope when it
    already holds the converted value and left empty otherwise.

    Args:
        literals: Literals of the source file, in document order
        file_set: Resource files of the project

    Returns:
        One entry per non-empty literal
    """
    entries: list[ExtractionEntry] = []

    for literal in literals:
        content = literal.normalized_text
        if not content:
            continue

        value = convert(content).value
        key = file_set.find_key_by_value(value) or ""
        entries.append(
            ExtractionEntry(
                original_text=literal.raw_text, key=key, value=value, literal=literal
            )
        )

    logger.debug(f"Prepared {len(entries)} entries, {sum(1 for e in entries if e.key)} with known keys")
    return entries


def assign_key(
    entries: Sequence[ExtractionEntry], index: int, key: str, propagate: bool = False
) -> list[int]:
    """
    Set the key of one entry.

    Args:
        entries: Batch entries
        index: Position of the edited entry
        key: New key
        propagate: Also give the key to every other entry with the same value

    Returns:
        Indices of all entries whose key was set
    """
    target = entries[index]
    target.key = key
    updated = [index]

    if propagate:
        for i, entry in enumerate(entries):
            if i != index and entry.value == target.value:
                entry.key = key
                updated.append(i)
    return updated


def validate_entries(entries: Sequence[ExtractionEntry]) -> None:
    """
    Check that every entry has a key.

    Raises:
        EntryValidationError: If any entry has a blank key
    """
    blank = sum(1 for entry in entries if not entry.key.strip())
    if blank:
        raise EntryValidationError(
            f"{blank} entries have an empty key",
            blank_key_count=blank,
            user_message=f"There are {blank} entries with an empty key. Please fill them in.",
        )


def apply_replacements(
    source_text: str, replacements: Iterable[tuple[SourceLiteral, str]]
) -> str:
    """
    Replace literal spans in source text, last span first.

    A literal whose span no longer holds its original text (the document was
    edited in the meantime), or that overlaps an already replaced span, is
    left alone.

    Args:
        source_text: Current source document text
        replacements: Literals paired with their replacement code

    Returns:
        The updated source text
    """
    result = source_text
    boundary = len(source_text)

    for literal, new_code in sorted(replacements, key=lambda item: item[0].start, reverse=True):
        if literal.end > boundary:
            logger.warning(f"Skipping overlapping span {literal.start}..{literal.end}")
            continue
        if source_text[literal.start : literal.end] != literal.raw_text:
            logger.warning(f"Skipping stale span {literal.start}..{literal.end}")
            continue

        result = result[: literal.start] + new_code + result[literal.end :]
        boundary = literal.start
    return result


def entry_replacements(
    entries: Iterable[ExtractionEntry], class_name: str
) -> list[tuple[SourceLiteral, str]]:
    """Pair each entry's literal with its accessor code."""
    return [
        (entry.literal, accessor_expression(class_name, entry.key.strip()))
        for entry in entries
    ]
