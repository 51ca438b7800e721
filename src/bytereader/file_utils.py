"""
Facade over the io package.

open_reader() resolves "-" to the shared standard input reader and anything
else to a new FileReader. To extend: pass any ByteReader to iter_bytes().
"""

from typing import Iterator, Optional

from bytereader.constants import Constants as Co
from bytereader.io.base import ByteReader
from bytereader.io.local import FileReader
from bytereader.io.standard_input import standard_input


class FileUtils:
    """Facade for opening readers and walking their bytes."""

    @staticmethod
    def open_reader(path) -> FileReader:
        """Reader for path; "-" is standard input. Check is_opened() on the result."""
        if path == Co.STDIN_PATH:
            return standard_input()
        return FileReader(path)

    @staticmethod
    def iter_bytes(reader: ByteReader, limit: Optional[int] = None) -> Iterator[int]:
        """Yield bytes from reader until end of stream or limit bytes."""
        count = 0
        while limit is None or count < limit:
            value = reader.read_char()
            if value is None:
                return
            count += 1
            yield value

    @staticmethod
    def format_byte(value: int, fmt: str) -> str:
        if fmt == Co.HEX:
            return f"{value:02x}"
        if fmt == Co.DEC:
            return f"{value:3d}"
        if fmt == Co.CHAR:
            return chr(value) if 0x20 <= value < 0x7F else "."
        raise ValueError(f"Unknown byte format: {fmt}")
