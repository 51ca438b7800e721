"""Local filesystem implementation of ByteReader."""

import logging
import os

logger = logging.getLogger(__name__)


def _check_path(path) -> None:
    # open() would take an int as a file descriptor and close it later
    if isinstance(path, bool) or not isinstance(path, (str, bytes, os.PathLike)):
        raise TypeError(f"Expected a filesystem path, got {type(path).__name__}")


class FileReader:
    """
    Read a local file one byte at a time.

    Owns at most one binary handle. The handle is released when the reader is
    used as a context manager and the block exits, on close(), or when the
    reader is garbage collected. Streams bound with from_stream() (standard
    input) are never closed by the reader and stay bound until open() replaces
    them.

    Failures are return values, not exceptions: open() returns False,
    read_char() returns None, try_rewind() returns False.
    """

    def __init__(self, path=None):
        self._handle = None
        self._owns_handle = False
        self._pushback: list[int] = []
        if path is not None:
            self.open(path)

    @classmethod
    def from_stream(cls, stream) -> "FileReader":
        """Wrap an already open binary stream without taking ownership of it."""
        reader = cls()
        reader._handle = stream
        return reader

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self):
        self.close()

    def __repr__(self) -> str:
        name = getattr(self._handle, "name", None)
        return f"<FileReader name={name!r} opened={self.is_opened()}>"

    def is_opened(self) -> bool:
        return self._handle is not None

    def open(self, path: str | bytes | os.PathLike) -> bool:
        """
        Open path for binary reading, replacing the current handle.

        The previous handle is closed first even when the new open fails, so a
        failed reopen leaves the reader with nothing opened.
        """
        _check_path(path)
        self.close()
        # a borrowed stream survives close(); drop the reference without closing it
        self._handle = None
        self._pushback.clear()
        try:
            self._handle = open(path, "rb")
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL in the path
            logger.debug("Could not open %s: %s", path, e)
            return False
        self._owns_handle = True
        return True

    def close(self) -> None:
        """Release the handle. A no-op for empty readers and borrowed streams, which stay bound."""
        if not self._owns_handle:
            return
        handle = self._handle
        self._handle = None
        self._owns_handle = False
        self._pushback.clear()
        handle.close()

    def read_char(self) -> int | None:
        """Return the next byte as an int in 0..255, or None at end of stream."""
        if self._handle is None:
            return None
        if self._pushback:
            return self._pushback.pop()
        try:
            data = self._handle.read(1)
        except (OSError, ValueError) as e:
            logger.debug("Read failed on %r: %s", self, e)
            return None
        if not data:
            return None
        return data[0]

    def unread_char(self, value: int) -> bool:
        """
        Push a byte back so the next read_char() returns it.

        Pushed bytes come back last in, first out. They are dropped by open(),
        closing an owned handle and a successful try_rewind().
        """
        if not 0 <= value <= 255:
            raise ValueError(f"Byte value out of range: {value}")
        if self._handle is None:
            return False
        self._pushback.append(value)
        return True

    def try_rewind(self) -> bool:
        """Seek back to offset zero. False when nothing is open or the stream cannot seek."""
        if self._handle is None:
            return False
        try:
            if not self._handle.seekable():
                return False
            self._handle.seek(0)
        except (OSError, ValueError) as e:
            # position stays wherever the failed seek left it
            logger.debug("Rewind failed on %r: %s", self, e)
            return False
        self._pushback.clear()
        return True
