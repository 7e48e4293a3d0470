from __future__ import annotations

"""
Integration tests for the output sink.
"""

import io

import pytest

from dirtree.domain.errors import WriteError
from dirtree.infra.output import write_output


def test_payload_written_once(tmp_path) -> None:
    target = tmp_path / "tree.txt"
    with open(target, "w", encoding="utf-8") as f:
        write_output(f, "└───a\n")
    assert target.read_text(encoding="utf-8") == "└───a\n"


def test_closed_stream_raises_write_error() -> None:
    stream = io.StringIO()
    stream.close()
    with pytest.raises(WriteError) as exc:
        write_output(stream, "x")
    assert isinstance(exc.value.__cause__, ValueError)
