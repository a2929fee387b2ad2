"""CLI helpers for MONIKER.

Click callbacks and small import utilities used by the command-line
interface.
"""

from .log_level_parser import parse_log_level
from .targets import import_target

__all__ = ["import_target", "parse_log_level"]
