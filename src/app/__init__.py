"""
Application layer: byte dump service and command line entry point.

Run: PYTHONPATH=src python -m app.cli [PATH]
"""

from app.dump_service import ByteDumper

__all__ = ["ByteDumper"]
