# console.py
"""
Progress / diagnostic output for the exporter.

Everything goes to stderr so the export files stay the only real output.
Nesting depth is shown as two spaces per level:

  [INFO] Resource group: ML-RG
  [INFO]   1 Workspace(s)
  [INFO]     Workspace: space03
  [INFO]       Computes: 3

Debug lines (and tracebacks of caught failures) only show up when
AMLX_DEBUG=1 or --debug is passed.
"""

import os
import sys
import traceback

_DEBUG = os.getenv("AMLX_DEBUG", "").strip() in ("1", "true", "True", "yes", "YES")


def set_debug(enabled: bool) -> None:
    global _DEBUG
    _DEBUG = bool(enabled)


def _emit(level: str, msg: str, depth: int = 0) -> None:
    print(f"[{level}] {'  ' * depth}{msg}", file=sys.stderr)


def info(msg: str, depth: int = 0) -> None:
    _emit("INFO", msg, depth)


def warn(msg: str, depth: int = 0) -> None:
    _emit("WARN", msg, depth)


def error(msg: str, depth: int = 0) -> None:
    _emit("ERROR", msg, depth)


def debug(msg: str, depth: int = 0) -> None:
    if _DEBUG:
        _emit("DEBUG", msg, depth)


def debug_traceback() -> None:
    if _DEBUG:
        traceback.print_exc(file=sys.stderr)
