from __future__ import annotations

"""
Domain Error Types.

Failures raised while listing directories or delivering the rendered tree.
Both abort the whole operation and are reported by the interface layer.
"""

from typing import Optional


class DirTreeError(Exception):
    """Base class for every error raised by the tree generator."""


class ListingError(DirTreeError):
    """
    A directory along the walk could not be listed.

    Attributes:
        path: Directory that failed to list.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(f"failed to read dir from path '{path}': {self.reason}")


class WriteError(DirTreeError):
    """The output sink refused the rendered payload."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"failed to write tree to the output: {reason}")
