"""Process-wide reader bound to standard input."""

import io
import sys

from bytereader.io.local import FileReader

_BINARY_STREAMS = (io.BufferedIOBase, io.RawIOBase)

_standard_input: FileReader | None = None


def _binary_stdin():
    """sys.stdin's binary stream, or None when stdin is text-only (StringIO, IDLE) or missing."""
    stdin = sys.stdin
    if isinstance(stdin, _BINARY_STREAMS):
        return stdin
    buffer = getattr(stdin, "buffer", None)
    if isinstance(buffer, _BINARY_STREAMS):
        return buffer
    return None


def standard_input() -> FileReader:
    """
    Return the shared standard input reader, creating it on first use.

    The reader borrows sys.stdin's binary buffer and never closes it. When
    stdin has no binary buffer the reader stays unopened. All callers share
    one stream position and there is no locking: callers using it from
    several threads must serialize access themselves.
    """
    global _standard_input
    if _standard_input is None:
        _standard_input = FileReader.from_stream(_binary_stdin())
    return _standard_input


def reset_standard_input() -> None:
    """Forget the shared reader so the next call binds the current sys.stdin."""
    global _standard_input
    _standard_input = None
