"""
Byte-at-a-time file reading with scoped handle release.

Subpackages:
  io      - ByteReader protocol, FileReader, standard_input singleton
  config  - ConfigProvider, YamlConfigProvider, load_config (read on demand, never at import)

Public API: FileReader, standard_input, FileUtils, Constants.
"""

from bytereader.io import ByteReader, FileReader, standard_input
from bytereader.file_utils import FileUtils
from bytereader.constants import Constants

__all__ = [
    "ByteReader",
    "FileReader",
    "standard_input",
    "FileUtils",
    "Constants",
]
