"""ARB resource files and their synchronisation."""

from .file_set import DEFAULT_CLASS_NAME, ResourceFileSet
from .host import DEFAULT_HOST, EditorHost, FileSystemHost, TextBuffer
from .resource_file import ResourceFile
from .serializer import ARB_SERIALIZER, EMPTY_DOCUMENT, ArbSerializer
from .synchronizer import (
    OverwriteDecision,
    ResourceSynchronizer,
    SyncResult,
    find_key_by_value,
    key_exists,
)

__all__ = [
    "ARB_SERIALIZER",
    "DEFAULT_CLASS_NAME",
    "DEFAULT_HOST",
    "EMPTY_DOCUMENT",
    "ArbSerializer",
    "EditorHost",
    "FileSystemHost",
    "OverwriteDecision",
    "ResourceFile",
    "ResourceFileSet",
    "ResourceSynchronizer",
    "SyncResult",
    "TextBuffer",
    "find_key_by_value",
    "key_exists",
]
