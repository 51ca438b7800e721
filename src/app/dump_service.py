"""Render the bytes of a reader as offset-prefixed dump lines."""

import logging
from typing import Iterator, List

from bytereader.constants import Constants as Co
from bytereader.file_utils import FileUtils
from bytereader.io.base import ByteReader
from entity.dump_settings import DumpSettings

logger = logging.getLogger(__name__)


class ByteDumper:
    """
    Dump a reader line by line, `columns` bytes per line.

    With passes > 1 the reader is rewound between passes; a reader that
    cannot rewind (stdin on a pipe) stops after the passes done so far.
    """

    def __init__(self, settings: DumpSettings | None = None):
        self.settings = settings or DumpSettings()

    def dump_lines(self, reader: ByteReader) -> Iterator[str]:
        for pass_no in range(self.settings.passes):
            if pass_no and not reader.try_rewind():
                logger.warning("Input cannot be rewound; stopping after %d pass(es)", pass_no)
                return
            yield from self._pass_lines(reader)

    def _pass_lines(self, reader: ByteReader) -> Iterator[str]:
        offset = 0
        row: List[int] = []
        for value in FileUtils.iter_bytes(reader, self.settings.limit):
            row.append(value)
            if len(row) == self.settings.columns:
                yield self.format_row(offset, row)
                offset += len(row)
                row = []
        if row:
            yield self.format_row(offset, row)

    def format_row(self, offset: int, row: List[int]) -> str:
        fmt = self.settings.format
        sep = "" if fmt == Co.CHAR else " "
        return f"{offset:08x}  " + sep.join(FileUtils.format_byte(v, fmt) for v in row)
