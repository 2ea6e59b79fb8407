"""Literal normalisation and placeholder conversion."""

from .literals import DELIMITER_STYLES, DelimiterStyle, detect_style, strip_delimiters
from .placeholders import (
    ConversionResult,
    Segment,
    SegmentKind,
    convert,
    generate_param_name,
    scan_interpolations,
    suggest_key,
)

__all__ = [
    "DELIMITER_STYLES",
    "ConversionResult",
    "DelimiterStyle",
    "Segment",
    "SegmentKind",
    "convert",
    "detect_style",
    "generate_param_name",
    "scan_interpolations",
    "strip_delimiters",
    "suggest_key",
]
