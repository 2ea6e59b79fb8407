"""
Global test fixtures for ARB extractor tests.

Provides ARB directories on disk, resource file sets over them and an
in-memory editor host for the live-buffer path.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from arb_extractor.resources import ResourceFile, ResourceFileSet, ResourceSynchronizer
from tests.utils.test_helpers import ArbFactory, InMemoryHost, create_arb_file


@pytest.fixture
def arb_dir(tmp_path: Path) -> Path:
    """Empty ARB directory inside a temporary project."""
    directory = tmp_path / "lib" / "l10n"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def arb_factory(arb_dir: Path) -> ArbFactory:
    """
    Create ARB files in the temporary ARB directory.

    Returns:
        Callable taking a file name and content (mapping or raw text)
    """

    def factory(name: str, content: dict[str, object] | str) -> ResourceFile:
        return ResourceFile(create_arb_file(arb_dir / name, content))

    return factory


@pytest.fixture
def en_zh_files(arb_dir: Path) -> tuple[ResourceFile, ResourceFile]:
    """Two empty locale files that do not exist on disk yet."""
    return ResourceFile(arb_dir / "app_en.arb"), ResourceFile(arb_dir / "app_zh.arb")


@pytest.fixture
def editor_host() -> InMemoryHost:
    """Editor host without open buffers."""
    return InMemoryHost()


@pytest.fixture
def accepting_synchronizer() -> ResourceSynchronizer:
    """Synchronizer that approves every overwrite."""
    return ResourceSynchronizer(confirm_overwrite=lambda key: True)


@pytest.fixture
def declining_synchronizer() -> ResourceSynchronizer:
    """Synchronizer that keeps every existing key."""
    return ResourceSynchronizer(confirm_overwrite=lambda key: False)


@pytest.fixture
def file_set_factory() -> Callable[..., ResourceFileSet]:
    """Build a ResourceFileSet from resource files."""

    def factory(
        *files: ResourceFile, lookup_file: ResourceFile | None = None, class_name: str = "S"
    ) -> ResourceFileSet:
        return ResourceFileSet(files=files, lookup_file=lookup_file, class_name=class_name)

    return factory
