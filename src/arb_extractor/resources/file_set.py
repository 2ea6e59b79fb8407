"""The set of resource files one extraction keeps in sync."""

from __future__ import annotations

from dataclasses import dataclass

from .resource_file import ResourceFile
from .synchronizer import find_key_by_value

DEFAULT_CLASS_NAME = "S"


@dataclass(frozen=True)
class ResourceFileSet:
    """
    Ordered target files for one source file, fixed for an operation.

    Attributes:
        files: Files every write is applied to
        lookup_file: File searched when reusing a key for a known value
        class_name: Localizations class used in replacement code
    """

    files: tuple[ResourceFile, ...]
    lookup_file: ResourceFile | None = None
    class_name: str = DEFAULT_CLASS_NAME

    def __len__(self) -> int:
        return len(self.files)

    def __bool__(self) -> bool:
        return bool(self.files)

    @property
    def lookup_scope(self) -> tuple[ResourceFile, ...]:
        """The configured lookup file, otherwise only the first target."""
        if self.lookup_file is not None:
            return (self.lookup_file,)
        return self.files[:1]

    def find_key_by_value(self, value: str) -> str | None:
        """Search the lookup scope for a key whose value equals value."""
        return find_key_by_value(self.lookup_scope, value)
