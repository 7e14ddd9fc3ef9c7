"""
Log Files - Saves a session's game logs to disk.

File names encode the settings and the local time of saving:

    MNK_<width>-<height>-<matches>_<HH>-<MM>_<DD>-<MM>.log

The file content is identical to the View Game Log screen.
"""

from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

from ..settings import Settings
from ..engine_core.game_log import GameLog
from ..interface.render import format_log_collection

logger = logging.getLogger(__name__)


class LogWriteError(Exception):
    """Raised when the log file cannot be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write the logs to {path}: {reason}")


def log_file_name(settings: Settings, when: datetime | None = None) -> str:
    when = when or datetime.now()
    return (
        f"MNK_{settings.width}-{settings.height}-{settings.matches}"
        f"_{when:%H-%M}_{when:%d-%m}.log"
    )


def save_logs(
    game_logs: Iterable[GameLog],
    settings: Settings,
    directory: str | Path | None = None,
    when: datetime | None = None,
    include_settings_snapshot: bool = False,
) -> Path:
    """
    Write all game logs to a new file in `directory`.

    Returns the path written. Raises LogWriteError on any OS error.
    """
    directory = Path(directory) if directory is not None else Path.cwd()
    path = directory / log_file_name(settings, when)
    content = format_log_collection(game_logs, settings, include_settings_snapshot)

    try:
        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.warning("Could not write game log %s: %s", path, e)
        raise LogWriteError(path, str(e)) from e

    logger.info("Saved game logs to %s", path)
    return path
