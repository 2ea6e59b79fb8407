"""
Extraction workflow tying conversion, key selection and resource writes.

The host supplies the literal, asks the user for a key through the
``request_key`` callback and applies the returned replacement code. Nothing
in the source is to be replaced unless at least one resource file was
written.

Usage Examples:
    Extract the literal under the cursor:
        >>> extractor = LiteralExtractor(confirm_overwrite=ask_user_yes_no)
        >>> file_set = ProjectResolver().resolve(Path("lib/main.dart"))
        >>> outcome = extractor.extract(literal, file_set, lambda r: r.suggested_key)
        >>> outcome.replacement
        'S.of(context).cancel'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..formatting.placeholders import ConversionResult, convert
from ..resources.file_set import ResourceFileSet
from ..resources.synchronizer import OverwriteDecision, ResourceSynchronizer
from .batch import accessor_expression, validate_entries
from .models import ExtractionEntry, SingleExtraction, SourceLiteral

logger = logging.getLogger(__name__)

KeyPrompt = Callable[[ConversionResult], str | None]


class LiteralExtractor:
    """Runs single and batch extractions against a resource file set."""

    def __init__(
        self,
        confirm_overwrite: OverwriteDecision | None = None,
        synchronizer: ResourceSynchronizer | None = None,
    ) -> None:
        self.synchronizer: ResourceSynchronizer = synchronizer or ResourceSynchronizer(
            confirm_overwrite
        )

    def extract(
        self,
        literal: SourceLiteral,
        file_set: ResourceFileSet,
        request_key: KeyPrompt,
    ) -> SingleExtraction | None:
        """
        Extract one literal into the resource files.

        Args:
            literal: Literal or selection to extract
            file_set: Target resource files
            request_key: Asked for the final key with the conversion result;
                returning None or a blank key cancels

        Returns:
            SingleExtraction, or None if the user cancelled
        """
        conversion = convert(literal.normalized_text)

        key = request_key(conversion)
        if key is None or not key.strip():
            logger.info("Extraction cancelled, no key given")
            return None
        key = key.strip()

        if not file_set:
            logger.warning(f"No resource files configured, '{key}' not written")
            return SingleExtraction(key=key, value=conversion.value, files_written=0, replacement=None)

        written = self.synchronizer.write(file_set.files, key, conversion.value)
        replacement = accessor_expression(file_set.class_name, key) if written > 0 else None

        if replacement is None:
            logger.error(f"Failed to write '{key}' to any resource file")

        return SingleExtraction(
            key=key, value=conversion.value, files_written=written, replacement=replacement
        )

    def commit_batch(
        self, entries: Sequence[ExtractionEntry], file_set: ResourceFileSet
    ) -> int:
        """
        Validate batch entries and add them to the resource files.

        Existing keys are never overwritten by a batch.

        Args:
            entries: Reviewed entries
            file_set: Target resource files

        Returns:
            Number of files written

        Raises:
            EntryValidationError: If any entry has a blank key
        """
        validate_entries(entries)

        if not file_set:
            logger.warning(f"No resource files configured, {len(entries)} entries not written")
            return 0

        pairs = [(entry.key.strip(), entry.value) for entry in entries]
        return self.synchronizer.write_batch(file_set.files, pairs)
