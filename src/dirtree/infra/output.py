from __future__ import annotations

"""
Output Sink.

Delivers the fully rendered tree to a text stream in a single write.
"""

from typing import TextIO

from dirtree.domain.errors import WriteError


def write_output(out: TextIO, payload: str) -> None:
    """
    Write the payload to the stream once and flush it.

    Args:
        out: Destination text stream (usually sys.stdout).
        payload: Complete rendered text.

    Raises:
        WriteError: If the stream rejects the write or the flush.
    """
    try:
        out.write(payload)
        out.flush()
    except (OSError, ValueError) as e:
        raise WriteError(str(e)) from e
