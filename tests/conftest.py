from pathlib import Path
from typing import Dict, Union

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under a fresh root from a {relative_path: content} mapping.

    A key ending in "/" creates an empty directory; bytes values are written
    as binary.
    """

    def _make(layout: Dict[str, Union[str, bytes]], root_name: str = "project") -> Path:
        root = tmp_path / root_name
        root.mkdir()
        for relative, content in layout.items():
            path = root / relative
            if relative.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make
