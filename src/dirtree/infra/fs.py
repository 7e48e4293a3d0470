from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides directory listing, path joining and the resolution of the
per-user data directory. Acts as the only place where the tree generator
touches the 'os' module, so the rest of the code works on DirEntry
snapshots and can be fed fake listings in tests.
"""

import logging
import os
from typing import List

from dirtree.domain.errors import ListingError
from dirtree.domain.tree_models import DirEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DirTree"
UNIX_APP_DIR_NAME = ".dirtree"

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_directory(path: str) -> List[DirEntry]:
    """
    List the immediate children of a directory.

    The returned order is whatever the operating system yields; callers
    are responsible for sorting.

    Args:
        path: Directory to list.

    Returns:
        List[DirEntry]: One snapshot per child entry.

    Raises:
        ListingError: If the path does not exist, is not a directory,
                      is not readable or the read fails.
    """
    entries: List[DirEntry] = []
    try:
        with os.scandir(path) as it:
            for item in it:
                is_dir = item.is_dir(follow_symlinks=False)
                size = 0 if is_dir else item.stat(follow_symlinks=False).st_size
                entries.append(DirEntry(name=item.name, is_dir=is_dir, size=size))
    except OSError as e:
        raise ListingError(path, e.strerror or str(e)) from e

    logger.debug(f"Listed {len(entries)} entries in: {path}")
    return entries


def join_path(parent: str, name: str) -> str:
    """Join a directory path and a child entry name."""
    return os.path.join(parent, name)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    The directory is not created; readers treat a missing directory as
    an empty one.
    Standards:
    - Windows: %LOCALAPPDATA%/DirTree
    - Linux/Mac: ~/.dirtree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: str) -> str:
    """
    Expand $VAR/%VAR% and ~ in a user supplied path and make it absolute.

    Used for the paths read from the environment and the config file.
    """
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path.strip())))
