"""
ARB String Extractor - move hard-coded Dart strings into ARB localization files.
"""

from .config import ExtractorConfig, ProjectResolver, load_config
from .extraction import (
    ExtractionEntry,
    LiteralExtractor,
    SingleExtraction,
    SourceLiteral,
    apply_replacements,
    prepare_entries,
)
from .formatting import ConversionResult, convert, strip_delimiters
from .resources import ResourceFile, ResourceFileSet, ResourceSynchronizer

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "ExtractionEntry",
    "ExtractorConfig",
    "LiteralExtractor",
    "ProjectResolver",
    "ResourceFile",
    "ResourceFileSet",
    "ResourceSynchronizer",
    "SingleExtraction",
    "SourceLiteral",
    "apply_replacements",
    "convert",
    "load_config",
    "prepare_entries",
    "strip_delimiters",
]
