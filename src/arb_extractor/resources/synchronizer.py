"""
Synchronisation of key/value pairs across a set of ARB files.

Every target file is handled on its own: a file that cannot be read or
written is logged and skipped, and the remaining files are still attempted.
Callers only get the number of files written; zero means nothing was
written and any dependent source edit should not happen.

Usage Examples:
    Write one entry to every locale file:
        >>> synchronizer = ResourceSynchronizer(confirm_overwrite=lambda key: False)
        >>> synchronizer.write([en_file, zh_file], "hello", "Hello {name}")
        2

    Add several entries without touching existing keys:
        >>> synchronizer.write_batch([en_file], {"ok": "OK", "cancel": "Cancel"})
        1
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing_extensions import override

from ..core.exceptions import ResourceFileError
from .resource_file import ResourceFile

logger = logging.getLogger(__name__)

OverwriteDecision = Callable[[str], bool]


class SyncResult:
    """Result of a write over a target set."""

    def __init__(self, total_files: int = 0) -> None:
        self.total_files: int = total_files
        self.written_files: list[Path] = []
        self.failed_files: list[tuple[Path, Exception]] = []
        self.declined: bool = False

    @property
    def success_count(self) -> int:
        """
        Number of files reported as written.

        A declined overwrite reports the full target count although no file
        was modified: the caller goes on using the existing key.
        """
        if self.declined:
            return self.total_files
        return len(self.written_files)

    @property
    def failure_count(self) -> int:
        """Number of files that could not be written."""
        return len(self.failed_files)

    @override
    def __str__(self) -> str:
        if self.declined:
            return f"Sync Results: overwrite declined, {self.total_files} file(s) untouched"
        return (
            f"Sync Results: "
            f"{len(self.written_files)} written, "
            f"{self.failure_count} failed "
            f"of {self.total_files}"
        )


def _load_for_lookup(resource: ResourceFile) -> dict[str, object]:
    """Load a file for a read-only check; unreadable files count as empty."""
    try:
        return resource.load()
    except ResourceFileError as e:
        logger.warning(f"Skipping unreadable resource file {resource.path}: {e}")
        return {}


def key_exists(targets: Iterable[ResourceFile], key: str) -> bool:
    """Return True if key is present in any of the target files."""
    return any(key in _load_for_lookup(target) for target in targets)


def find_key_by_value(lookup_scope: Iterable[ResourceFile], value: str) -> str | None:
    """
    Find the first key whose value equals value exactly.

    Only the files passed in are searched; use
    ``ResourceFileSet.find_key_by_value`` to apply the lookup-file scope.

    Args:
        lookup_scope: Files to search, in order
        value: ARB value to look for

    Returns:
        The matching key, or None
    """
    for resource in lookup_scope:
        for key, existing in _load_for_lookup(resource).items():
            if existing == value:
                logger.debug(f"Found existing key '{key}' in {resource.path}")
                return key
    return None


class ResourceSynchronizer:
    """
    Writes ARB entries to a fixed list of resource files.

    The overwrite decision callback receives the duplicate key and returns
    True to overwrite it. Without a callback, existing keys are kept.
    """

    def __init__(self, confirm_overwrite: OverwriteDecision | None = None) -> None:
        self._confirm_overwrite: OverwriteDecision | None = confirm_overwrite

    def key_exists(self, targets: Iterable[ResourceFile], key: str) -> bool:
        """Return True if key is present in any of the target files."""
        return key_exists(targets, key)

    def find_key_by_value(
        self, lookup_scope: Iterable[ResourceFile], value: str
    ) -> str | None:
        """Find the first key in lookup_scope whose value equals value."""
        return find_key_by_value(lookup_scope, value)

    def write(self, targets: Sequence[ResourceFile], key: str, value: str) -> int:
        """
        Write one key/value pair to every target file.

        Args:
            targets: Files to write
            key: ARB key
            value: ARB value

        Returns:
            Number of files written, or the full target count when an
            existing key was kept
        """
        return self.write_detailed(targets, key, value).success_count

    def write_detailed(
        self, targets: Sequence[ResourceFile], key: str, value: str
    ) -> SyncResult:
        """Write one key/value pair and report per-file outcomes."""
        targets = tuple(targets)
        result = SyncResult(total_files=len(targets))

        if not targets:
            logger.warning(f"No resource files to write key '{key}' to")
            return result

        if key_exists(targets, key) and not self._should_overwrite(key):
            logger.info(f"Keeping existing key '{key}', resource files untouched")
            result.declined = True
            return result

        for target in targets:
            try:
                # Re-read after the decision; the file may have changed meanwhile
                with target.host.transaction(f"Write '{key}' to {target.name}"):
                    target.ensure_exists()
                    mapping = target.load()
                    mapping[key] = value
                    target.save(mapping)
                result.written_files.append(target.path)
                logger.debug(f"Wrote key '{key}' to {target.path}")
            except Exception as e:
                result.failed_files.append((target.path, e))
                logger.exception(f"Failed to write key '{key}' to {target.path}: {e}")

        logger.info(str(result))
        return result

    def write_batch(
        self,
        targets: Sequence[ResourceFile],
        entries: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> int:
        """
        Add several entries to every target file without overwriting.

        Keys already present in a file keep their value in that file.

        Args:
            targets: Files to write
            entries: Key/value pairs; later duplicates of a key win

        Returns:
            Number of files written
        """
        return self.write_batch_detailed(targets, entries).success_count

    def write_batch_detailed(
        self,
        targets: Sequence[ResourceFile],
        entries: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> SyncResult:
        """Add several entries and report per-file outcomes."""
        targets = tuple(targets)
        pairs = dict(entries)
        result = SyncResult(total_files=len(targets))

        if not targets:
            logger.warning(f"No resource files to write {len(pairs)} entries to")
            return result

        for target in targets:
            try:
                with target.host.transaction(f"Add {len(pairs)} entries to {target.name}"):
                    target.ensure_exists()
                    mapping = target.load()
                    added = 0
                    for key, value in pairs.items():
                        if key not in mapping:
                            mapping[key] = value
                            added += 1
                    target.save(mapping)
                result.written_files.append(target.path)
                logger.debug(f"Added {added} of {len(pairs)} entries to {target.path}")
            except Exception as e:
                result.failed_files.append((target.path, e))
                logger.exception(f"Failed to write entries to {target.path}: {e}")

        logger.info(str(result))
        return result

    def _should_overwrite(self, key: str) -> bool:
        if self._confirm_overwrite is None:
            return False
        return self._confirm_overwrite(key)
