"""
JSON serialisation for ARB resource files.

The serializer holds no state, so the module-level ``ARB_SERIALIZER`` is
shared by every resource file.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import final

from ..core.exceptions import MalformedResourceFileError

EMPTY_DOCUMENT = "{}"
BYTE_ORDER_MARK = "\ufeff"


@final
class ArbSerializer:
    """Parse and render ordered ARB key/value maps."""

    __slots__ = ()

    def parse(self, text: str) -> dict[str, object]:
        """
        Parse ARB text into an ordered map.

        Args:
            text: File content

        Returns:
            Mapping of keys to values in document order

        A leading UTF-8 byte-order mark is ignored.

        Raises:
            MalformedResourceFileError: If the text is not a JSON object
        """
        try:
            data: object = json.loads(text.removeprefix(BYTE_ORDER_MARK))
        except json.JSONDecodeError as e:
            raise MalformedResourceFileError(f"Invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedResourceFileError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return data  # pyright: ignore[reportUnknownVariableType]

    def dump(self, mapping: Mapping[str, object]) -> str:
        """
        Render a map as pretty-printed JSON.

        Non-ASCII characters are written as-is and the output ends with a
        newline.
        """
        return json.dumps(dict(mapping), indent=2, ensure_ascii=False) + "\n"


ARB_SERIALIZER = ArbSerializer()
