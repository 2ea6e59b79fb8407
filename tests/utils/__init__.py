"""
Test utilities package for ARB extractor tests.

## Available Modules

### test_helpers.py
- `InMemoryBuffer`: Editable text buffer standing in for an open editor document
- `InMemoryHost`: Editor host exposing buffers and recording transactions
- `create_arb_file()`: Write an ARB document to disk
- `read_arb_file()`: Parse an ARB document from disk
- `create_flutter_project()`: Lay out a pubspec.yaml and ARB directory

## Usage Examples

```python
from tests.utils.test_helpers import create_arb_file, read_arb_file

en = create_arb_file(tmp_path / "app_en.arb", {"cancel": "Cancel"})
assert read_arb_file(en) == {"cancel": "Cancel"}
```
"""

from .test_helpers import (
    FailingBuffer,
    InMemoryBuffer,
    InMemoryHost,
    create_arb_file,
    create_flutter_project,
    read_arb_file,
)

__all__ = [
    "FailingBuffer",
    "InMemoryBuffer",
    "InMemoryHost",
    "create_arb_file",
    "create_flutter_project",
    "read_arb_file",
]
