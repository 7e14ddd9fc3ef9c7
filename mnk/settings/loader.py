"""
Settings Loader - Reads game settings from a text file.

File format, one setting per line:

    M=5
    N=4
    K=3

Names are single letters (case-insensitive): M is width, N is height,
K is the number of tiles in a row needed to win. Every setting must
appear exactly once. Blank lines are ignored.
"""

from __future__ import annotations
import logging
import re
from pathlib import Path

from .schema import InvalidSettings, MAX_DIMENSION, Settings, make_settings

logger = logging.getLogger(__name__)

SETTING_NAMES = {
    "m": "width",
    "n": "height",
    "k": "matches",
}

_LINE_PATTERN = re.compile(r"^\s*([^=\s]*)\s*=\s*([+-]?\d+)\s*$")


def load_settings(path: str | Path) -> Settings:
    """
    Read and validate settings from a file.

    Raises InvalidSettings on any problem: unreadable file, bad line
    format, unknown or duplicate setting, value out of range, missing
    setting, or K larger than the smallest board dimension.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Could not open settings file %s: %s", path, e)
        raise InvalidSettings(f"Could not open the settings file: {path}") from e

    return parse_settings(text)


def parse_settings(text: str) -> Settings:
    """Parse and validate settings from file contents."""
    values: dict[str, int] = {}

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        match = _LINE_PATTERN.match(line)
        if not match:
            raise InvalidSettings(f"Invalid file format on line {line_number}: {line!r}")

        name, raw_value = match.group(1), int(match.group(2))
        if not valid_setting(name, raw_value):
            raise InvalidSettings(f"Invalid setting: {name}={raw_value}")

        field_name = SETTING_NAMES[name.lower()]
        if field_name in values:
            raise InvalidSettings(f"Duplicate setting: {name}")
        values[field_name] = raw_value

    missing = [
        letter.upper() for letter, field_name in SETTING_NAMES.items()
        if field_name not in values
    ]
    if missing:
        raise InvalidSettings(
            f"Not all 3 settings were provided (missing: {', '.join(missing)})"
        )

    settings = make_settings(**values)
    logger.debug("Loaded settings %s", settings)
    return settings


def valid_setting(name: str, value: int) -> bool:
    """Check a single setting name and value range."""
    return (
        len(name) == 1
        and name.lower() in SETTING_NAMES
        and 0 < value <= MAX_DIMENSION
    )
