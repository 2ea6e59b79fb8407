"""Project configuration and resource file resolution."""

from .manager import CONFIG_BLOCK, PUBSPEC_FILE_NAME, load_config
from .resolver import DEFAULT_ARB_FILE_NAME, ProjectResolver
from .schema import DEFAULT_ARB_DIR, DEFAULT_CLASS_NAME, ExtractorConfig

__all__ = [
    "CONFIG_BLOCK",
    "DEFAULT_ARB_DIR",
    "DEFAULT_ARB_FILE_NAME",
    "DEFAULT_CLASS_NAME",
    "PUBSPEC_FILE_NAME",
    "ExtractorConfig",
    "ProjectResolver",
    "load_config",
]
