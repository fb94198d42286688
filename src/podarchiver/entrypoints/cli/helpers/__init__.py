"""CLI helpers for PODARCHIVER.

Parsing of NAME=LEVEL logger options and stderr message emitters with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
