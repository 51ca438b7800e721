"""Byte-level readers. Extend by implementing the ByteReader protocol."""

from bytereader.io.base import ByteReader
from bytereader.io.local import FileReader
from bytereader.io.standard_input import reset_standard_input, standard_input

__all__ = ["ByteReader", "FileReader", "standard_input", "reset_standard_input"]
