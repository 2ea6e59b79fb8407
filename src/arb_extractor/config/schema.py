"""Configuration schema for the ARB string extractor."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..resources.file_set import DEFAULT_CLASS_NAME

DEFAULT_ARB_DIR = "lib/l10n"


class ExtractorConfig(BaseModel):
    """Settings read from the ``flutter_string_extractor`` block of pubspec.yaml."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    arb_dir: str = Field(
        default=DEFAULT_ARB_DIR,
        description="Directory holding the .arb files, relative to the project root",
        min_length=1,
    )
    class_name: str = Field(
        default=DEFAULT_CLASS_NAME,
        alias="localizations_class_name",
        description="Localizations class used in replacement code (e.g. S, AppLocalizations)",
    )
    lookup_file: str | None = Field(
        default=None,
        description="ARB file name searched when reusing keys for known values",
    )

    @field_validator("arb_dir")
    @classmethod
    def normalize_arb_dir(cls, v: str) -> str:
        """Strip surrounding whitespace and trailing slashes."""
        normalized = v.strip().rstrip("/")
        if not normalized:
            raise ValueError("arb_dir must not be empty")
        return normalized

    @field_validator("class_name")
    @classmethod
    def validate_class_name(cls, v: str) -> str:
        """Ensure the class name is a usable identifier."""
        v = v.strip()
        if not v.isidentifier():
            raise ValueError(f"'{v}' is not a valid class name")
        return v

    @field_validator("lookup_file")
    @classmethod
    def validate_lookup_file(cls, v: str | None) -> str | None:
        """Treat a blank lookup file as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None
