"""
Settings - Validated game configuration.

Settings are produced once (from a file or the settings editor) and
shared read-only with the engine. Invalid settings abort before any
board exists.
"""

from .schema import Settings, InvalidSettings, MAX_DIMENSION, make_settings
from .loader import load_settings, parse_settings, valid_setting

__all__ = [
    "Settings",
    "InvalidSettings",
    "MAX_DIMENSION",
    "make_settings",
    "load_settings",
    "parse_settings",
    "valid_setting",
]
