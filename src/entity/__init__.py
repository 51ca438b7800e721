"""Shared entities: dump settings."""

from entity.dump_settings import DumpSettings

__all__ = ["DumpSettings"]
