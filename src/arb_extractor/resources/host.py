"""
Host editing context integration.

The extractor runs inside an editor that may hold unsaved, editable copies
of resource files. The protocols here let a host expose those buffers, wrap
writes in its undo transaction and hear about changed files. Without a host
the plain filesystem is used.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Protocol


class TextBuffer(Protocol):
    """Live, editable text of an open document."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...


class EditorHost(Protocol):
    """Services the surrounding editor provides to the extractor."""

    def find_buffer(self, path: Path) -> TextBuffer | None:
        """Return the live buffer for path, if the host has one open."""
        ...

    def transaction(self, label: str) -> AbstractContextManager[None]:
        """Group the writes made inside the context into one undoable edit."""
        ...

    def file_changed(self, path: Path) -> None:
        """Notify the host that path was written on disk."""
        ...


class FileSystemHost:
    """Host with no open buffers; every read and write goes to disk."""

    def find_buffer(self, path: Path) -> TextBuffer | None:  # pyright: ignore[reportUnusedParameter]
        return None

    @contextmanager
    def transaction(self, label: str) -> Iterator[None]:  # pyright: ignore[reportUnusedParameter]
        yield

    def file_changed(self, path: Path) -> None:  # pyright: ignore[reportUnusedParameter]
        return None


DEFAULT_HOST: EditorHost = FileSystemHost()
