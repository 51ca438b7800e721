"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import io
import os
import sys
from pathlib import Path

import pytest

# Ensure src is on path so imports like bytereader.*, entity.* work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Set working directory so relative paths in config resolve
os.chdir(PROJECT_ROOT)

from bytereader.io.standard_input import reset_standard_input  # noqa: E402


@pytest.fixture
def write_file(tmp_path):
    """Write bytes to tmp_path/name and return the path."""

    def _write(data: bytes, name: str = "tmp.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def opened_handles(monkeypatch):
    """Record every handle FileReader opens."""
    handles = []

    def _spy_open(*args, **kwargs):
        handle = open(*args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr("bytereader.io.local.open", _spy_open, raising=False)
    return handles


@pytest.fixture
def stdin_pipe(monkeypatch):
    """Replace sys.stdin with a non-seekable pipe holding the given bytes."""
    streams = []

    def _bind(data: bytes = b""):
        read_fd, write_fd = os.pipe()
        os.write(write_fd, data)
        os.close(write_fd)
        stream = io.TextIOWrapper(os.fdopen(read_fd, "rb"))
        streams.append(stream)
        monkeypatch.setattr(sys, "stdin", stream)
        reset_standard_input()
        return stream

    yield _bind
    reset_standard_input()
    for stream in streams:
        stream.close()
