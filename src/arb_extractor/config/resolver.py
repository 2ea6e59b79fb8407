"""
Resolution of the resource file set for a source file.

Starting from the edited Dart file, the nearest pubspec.yaml marks the
project root. The configured ARB directory below it supplies the target
files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.exceptions import ConfigurationError
from ..resources.file_set import ResourceFileSet
from ..resources.host import DEFAULT_HOST, EditorHost
from ..resources.resource_file import ResourceFile
from .manager import PUBSPEC_FILE_NAME, load_config
from .schema import ExtractorConfig

logger = logging.getLogger(__name__)

ARB_SUFFIX = ".arb"
DEFAULT_ARB_FILE_NAME = "app_en.arb"


class ProjectResolver:
    """Finds the project configuration and ARB files for a source file."""

    def __init__(self, host: EditorHost | None = None) -> None:
        self.host: EditorHost = host or DEFAULT_HOST

    @staticmethod
    def find_pubspec(source: Path) -> Path | None:
        """
        Walk up from source to the nearest pubspec.yaml.

        Args:
            source: Edited file or a directory inside the project

        Returns:
            Path to pubspec.yaml, or None outside a Flutter project
        """
        start = source if source.is_dir() else source.parent
        for directory in (start, *start.parents):
            candidate = directory / PUBSPEC_FILE_NAME
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def read_config(pubspec: Path) -> ExtractorConfig:
        """Load settings, falling back to defaults if they cannot be used."""
        try:
            return load_config(pubspec)
        except ConfigurationError as e:
            logger.warning(f"Using default extractor settings: {e}")
            return ExtractorConfig()

    def class_name_for(self, source: Path) -> str:
        """Localizations class name configured for the project of source."""
        pubspec = self.find_pubspec(source)
        if pubspec is None:
            return ExtractorConfig().class_name
        return self.read_config(pubspec).class_name

    def resolve(self, source: Path) -> ResourceFileSet:
        """
        Build the resource file set for a source file.

        The set is empty outside a project or when the ARB directory does not
        exist. An ARB directory without any .arb file yields a single
        ``app_en.arb`` that is created on first write.

        Args:
            source: Edited Dart file

        Returns:
            ResourceFileSet with the target files, lookup file and class name
        """
        pubspec = self.find_pubspec(source)
        if pubspec is None:
            logger.warning(f"No {PUBSPEC_FILE_NAME} found above {source}")
            return ResourceFileSet(files=())

        config = self.read_config(pubspec)
        arb_dir = pubspec.parent / config.arb_dir

        if not arb_dir.is_dir():
            logger.warning(f"ARB directory does not exist: {arb_dir}")
            return ResourceFileSet(files=(), class_name=config.class_name)

        arb_paths = sorted(
            path for path in arb_dir.iterdir()
            if path.is_file() and path.suffix == ARB_SUFFIX
        )
        if not arb_paths:
            logger.info(f"No ARB files in {arb_dir}, proposing {DEFAULT_ARB_FILE_NAME}")
            arb_paths = [arb_dir / DEFAULT_ARB_FILE_NAME]

        files = tuple(ResourceFile(path, self.host) for path in arb_paths)
        return ResourceFileSet(
            files=files,
            lookup_file=self._lookup_file(arb_dir, config),
            class_name=config.class_name,
        )

    def _lookup_file(self, arb_dir: Path, config: ExtractorConfig) -> ResourceFile | None:
        if config.lookup_file is None:
            return None

        lookup = ResourceFile(arb_dir / config.lookup_file, self.host)
        if not lookup.exists:
            logger.warning(f"Configured lookup file does not exist: {lookup.path}")
            return None
        return lookup
