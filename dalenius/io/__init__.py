"""I/O helpers for dalenius results."""

from dalenius.io.json_utils import json_safe

__all__ = ["json_safe"]
