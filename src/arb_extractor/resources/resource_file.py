"""
Resource file abstraction.

A ResourceFile reads and writes one ARB document. When the host has the file
open, its live buffer is authoritative for both reads and writes, so edits
stay undoable and unsaved changes are never replaced by stale disk content.
Callers only ever see text and key/value maps.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing_extensions import override

from ..core.exceptions import MalformedResourceFileError, ResourceFileError
from .host import DEFAULT_HOST, EditorHost
from .serializer import ARB_SERIALIZER, EMPTY_DOCUMENT

logger = logging.getLogger(__name__)


class ResourceFile:
    """One ARB file identified by its path."""

    def __init__(self, path: Path, host: EditorHost | None = None) -> None:
        self.path: Path = Path(path)
        self.host: EditorHost = host or DEFAULT_HOST

    @override
    def __repr__(self) -> str:
        return f"ResourceFile({str(self.path)!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceFile):
            return NotImplemented
        return self.path == other.path

    @override
    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def exists(self) -> bool:
        """Whether the file has a live buffer or exists on disk."""
        return self.host.find_buffer(self.path) is not None or self.path.is_file()

    def read_text(self) -> str | None:
        """
        Read the current content.

        Returns:
            The live buffer text if open, the file content if on disk,
            or None if the file is pending creation

        Raises:
            ResourceFileError: If the file exists but cannot be read
        """
        buffer = self.host.find_buffer(self.path)
        if buffer is not None:
            return buffer.get_text()

        if not self.path.is_file():
            return None

        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceFileError(
                f"Failed to read {self.path}: {e}", context=self.path
            ) from e

    def write_text(self, text: str) -> None:
        """
        Replace the content, creating parent directories when needed.

        Disk writes go through a temporary file in the target directory and
        an atomic replace.

        Raises:
            ResourceFileError: If the content cannot be persisted
        """
        buffer = self.host.find_buffer(self.path)
        if buffer is not None:
            buffer.set_text(text)
            return

        temp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                _ = temp_file.write(text)
                temp_file.flush()
                temp_path = Path(temp_file.name)

            # Keep the permissions of an existing file
            if self.path.exists():
                shutil.copymode(self.path, temp_path)
            _ = temp_path.replace(self.path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise ResourceFileError(
                f"Failed to write {self.path}: {e}", context=self.path
            ) from e

        self.host.file_changed(self.path)

    def ensure_exists(self) -> None:
        """Create the file as an empty document if it does not exist yet."""
        if not self.exists:
            logger.info(f"Creating resource file {self.path}")
            self.write_text(EMPTY_DOCUMENT)

    def load(self) -> dict[str, object]:
        """
        Load the current key/value map.

        The content is re-read on every call. A missing file gives an empty
        map, and so does content that is not a JSON object.

        Raises:
            ResourceFileError: If the file exists but cannot be read
        """
        text = self.read_text()
        if text is None or not text.strip():
            return {}

        try:
            return ARB_SERIALIZER.parse(text)
        except MalformedResourceFileError as e:
            logger.warning(f"Treating {self.path} as empty: {e}")
            return {}

    def save(self, mapping: Mapping[str, object]) -> None:
        """Serialise and persist a key/value map."""
        self.write_text(ARB_SERIALIZER.dump(mapping))
