"""
bytedump - print a file or standard input byte by byte.

Every byte goes through FileReader.read_char(), so the tool doubles as an end
to end check of the reader: binary-safe reads, rewinding between passes and
the shared standard input reader.

Exit codes: 0 success, 1 input cannot be opened, 2 usage or settings error.

Usage:
    python -m app.cli data.bin
    cat data.bin | python -m app.cli --format dec
    python -m app.cli data.bin --passes 2 --columns 8
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from bytereader.config import load_config
from bytereader.constants import DUMP_FORMATS, Constants as Co
from bytereader.file_utils import FileUtils
from entity.dump_settings import DumpSettings
from app.dump_service import ByteDumper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytedump",
        description="Dump a file or standard input one byte at a time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hex dump of a file
  python -m app.cli data.bin

  # Decimal dump of piped input
  cat data.bin | python -m app.cli - --format dec

  # Read the file twice, rewinding in between
  python -m app.cli data.bin --passes 2
        """
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=Co.STDIN_PATH,
        help="File to dump; '-' (default) reads standard input"
    )
    parser.add_argument("--format", choices=DUMP_FORMATS, help="Byte rendering (default: dump.format from config)")
    parser.add_argument("--columns", type=int, help="Bytes per output line")
    parser.add_argument("--limit", type=int, help="Stop each pass after this many bytes")
    parser.add_argument("--passes", type=int, help="Read the input this many times, rewinding in between")
    parser.add_argument("--config", help="YAML config file (default: src/config/config.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log reader failures (DEBUG)")
    return parser


def _log_level(cfg) -> str:
    level = str((cfg.get(Co.LOGGING) or {}).get(Co.LEVEL, "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown logging level '{level}'")
    return level


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(Path(args.config) if args.config else None)
        level = "DEBUG" if args.verbose else _log_level(cfg)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        parser.error(f"invalid config: {e}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = DumpSettings.from_config(
            cfg,
            format=args.format,
            columns=args.columns,
            limit=args.limit,
            passes=args.passes,
        )
    except ValidationError as e:
        parser.error(f"invalid settings:\n{e}")

    reader = FileUtils.open_reader(args.path)
    if not reader.is_opened():
        print(f"Error: cannot open '{args.path}'", file=sys.stderr)
        return 1

    with reader:
        for line in ByteDumper(settings).dump_lines(reader):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
