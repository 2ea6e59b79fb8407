"""Data types passed between the host and the extraction workflow."""

from __future__ import annotations

from dataclasses import dataclass

from ..formatting.literals import strip_delimiters


@dataclass(frozen=True)
class SourceLiteral:
    """
    A literal (or manual selection) in the edited source file.

    Attributes:
        raw_text: Source text of the span, delimiters included for literals
        start: Start offset of the span in the source document
        end: End offset of the span in the source document
        quoted: False for a manual selection, whose text is used as-is
    """

    raw_text: str
    start: int
    end: int
    quoted: bool = True

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid source span: {self.start}..{self.end}")

    @classmethod
    def from_selection(cls, text: str, start: int, end: int) -> SourceLiteral:
        """Create a literal from text the user selected by hand."""
        return cls(raw_text=text, start=start, end=end, quoted=False)

    @property
    def normalized_text(self) -> str:
        """Literal content without delimiters."""
        if not self.quoted:
            return self.raw_text
        return strip_delimiters(self.raw_text)


@dataclass
class ExtractionEntry:
    """One row of a batch extraction; only the key is edited by the user."""

    original_text: str
    key: str
    value: str
    literal: SourceLiteral


@dataclass(frozen=True)
class SingleExtraction:
    """
    Outcome of extracting one literal.

    ``replacement`` is the code to put in place of the literal, or None when
    no resource file was written and the source must stay as it is.
    """

    key: str
    value: str
    files_written: int
    replacement: str | None
