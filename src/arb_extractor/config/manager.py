"""
Loading extractor settings from a Flutter project's pubspec.yaml.

The settings live in an optional top-level block:

    flutter_string_extractor:
      arb_dir: lib/l10n
      localizations_class_name: S
      lookup_file: app_en.arb
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.exceptions import ConfigurationError
from .schema import ExtractorConfig

logger = logging.getLogger(__name__)

PUBSPEC_FILE_NAME = "pubspec.yaml"
CONFIG_BLOCK = "flutter_string_extractor"


def load_config(pubspec_path: Path) -> ExtractorConfig:
    """
    Load and validate extractor settings from a pubspec.yaml file.

    A pubspec without a ``flutter_string_extractor`` block yields the
    default configuration.

    Args:
        pubspec_path: Path to pubspec.yaml

    Returns:
        ExtractorConfig: Validated configuration object

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or the block fails validation
    """
    try:
        with pubspec_path.open("r", encoding="utf-8") as f:
            raw_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read {pubspec_path}: {e}", context=pubspec_path
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in {pubspec_path}: {e}", context=pubspec_path
        ) from e

    match raw_data:
        case None:
            return ExtractorConfig()
        case dict():
            block: object = raw_data.get(CONFIG_BLOCK)  # pyright: ignore[reportUnknownMemberType]
        case _:
            raise ConfigurationError(
                f"{pubspec_path} must contain a YAML mapping, got {type(raw_data).__name__}",
                context=pubspec_path,
            )

    match block:
        case None:
            logger.debug(f"No {CONFIG_BLOCK} block in {pubspec_path}, using defaults")
            return ExtractorConfig()
        case dict():
            config_data = {str(k): _scalar_to_str(v) for k, v in block.items()}  # pyright: ignore[reportUnknownVariableType, reportUnknownArgumentType]
        case _:
            raise ConfigurationError(
                f"{CONFIG_BLOCK} in {pubspec_path} must be a mapping",
                context=pubspec_path,
            )

    try:
        return ExtractorConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {CONFIG_BLOCK} settings in {pubspec_path}: {e}",
            context=pubspec_path,
        ) from e


def _scalar_to_str(value: object) -> object:
    """YAML may read bare scalars as numbers; settings are always strings."""
    match value:
        case bool() | None:
            return value
        case int() | float():
            return str(value)
        case _:
            return value
