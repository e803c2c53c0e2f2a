# gausselim/utils/__init__.py
from __future__ import annotations
from .logger import info, warn, error, debug, set_debug, is_debug

__all__ = ["info", "warn", "error", "debug", "set_debug", "is_debug"]
