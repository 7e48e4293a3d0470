from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that describe directory layouts either on disk or
   as in-memory listings for the builder.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirtree.domain.errors import ListingError  # noqa: E402
from dirtree.domain.tree_models import DirEntry  # noqa: E402

# A layout maps names to either a nested layout (directory) or an int (file size).
Layout = Dict[str, Any]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_lister() -> Callable[[Layout], Callable[[str], List[DirEntry]]]:
    """
    Return a factory turning a nested layout into a fake directory lister.

    The fake resolves paths relative to the virtual root "root" and
    raises ListingError for anything that is not a known directory. Every
    listed path is recorded in the lister's 'calls' attribute.
    """
    def factory(layout: Layout) -> Callable[[str], List[DirEntry]]:
        calls: List[str] = []

        def lister(path: str) -> List[DirEntry]:
            calls.append(path)
            parts = Path(path).parts
            if not parts or parts[0] != "root":
                raise ListingError(path, "no such file or directory")

            node: Any = layout
            for part in parts[1:]:
                if not isinstance(node, dict) or part not in node:
                    raise ListingError(path, "no such file or directory")
                node = node[part]

            if not isinstance(node, dict):
                raise ListingError(path, "not a directory")

            # Reverse the natural order so the builder has to sort
            return [
                DirEntry(name=name, is_dir=isinstance(value, dict),
                         size=0 if isinstance(value, dict) else value)
                for name, value in reversed(list(node.items()))
            ]

        lister.calls = calls  # type: ignore[attr-defined]
        return lister

    return factory


@pytest.fixture
def make_layout(tmp_path: Path) -> Callable[[Layout], Path]:
    """
    Return a factory materializing a nested layout under tmp_path/"root".

    Directories are created empty; files are filled with 'x' up to the
    requested byte size.
    """
    def factory(layout: Layout) -> Path:
        root = tmp_path / "root"
        root.mkdir()
        _materialize(root, layout)
        return root

    return factory


def _materialize(base: Path, layout: Layout) -> None:
    for name, value in layout.items():
        target = base / name
        if isinstance(value, dict):
            target.mkdir()
            _materialize(target, value)
        else:
            target.write_bytes(b"x" * value)
