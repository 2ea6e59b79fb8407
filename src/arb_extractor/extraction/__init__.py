"""Single and batch extraction workflow."""

from .batch import (
    accessor_expression,
    apply_replacements,
    assign_key,
    entry_replacements,
    prepare_entries,
    validate_entries,
)
from .extractor import KeyPrompt, LiteralExtractor
from .models import ExtractionEntry, SingleExtraction, SourceLiteral

__all__ = [
    "ExtractionEntry",
    "KeyPrompt",
    "LiteralExtractor",
    "SingleExtraction",
    "SourceLiteral",
    "accessor_expression",
    "apply_replacements",
    "assign_key",
    "entry_replacements",
    "prepare_entries",
    "validate_entries",
]
