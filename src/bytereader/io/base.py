"""Protocol for byte readers. Implement this to add in-memory, remote, etc. sources."""

import os
from typing import Protocol


class ByteReader(Protocol):
    """Read a source one byte at a time (local path, standard input, etc.)."""

    def is_opened(self) -> bool:
        ...

    def open(self, path: str | bytes | os.PathLike) -> bool:
        ...

    def read_char(self) -> int | None:
        """Return the next byte as 0..255, or None when nothing can be read."""
        ...

    def try_rewind(self) -> bool:
        ...
