"""
Game Config - Feature toggles resolved once at startup.

Environment variables:
    MNK_EDITOR      Enable the settings editor and per-game settings snapshots
    MNK_SECRET      Hide the "Save Game Log" menu item
    MNK_LOG_DIR     Directory for saved game logs (default: current directory)
    MNK_COLOR       ANSI colours in board rendering (default: on)
    MNK_LOG_LEVEL   Diagnostic logging level (default: WARNING)
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class GameConfig:
    """
    Explicit configuration passed into the game loop and sessions.

    editor_mode replaces the old compile-time "Editor" build: it adds the
    Edit Settings menu item and stores a settings snapshot in every game log.
    secret_mode replaces the "Secret" build: it removes Save Game Log.
    """
    editor_mode: bool = False
    secret_mode: bool = False
    log_dir: Path = field(default_factory=Path.cwd)
    color: bool = True
    log_level: str = "WARNING"

    @property
    def include_settings_snapshot(self) -> bool:
        return self.editor_mode

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> GameConfig:
        """Build config from environment variables."""
        env = os.environ if env is None else env
        log_dir = env.get("MNK_LOG_DIR")
        return cls(
            editor_mode=_env_flag(env, "MNK_EDITOR", False),
            secret_mode=_env_flag(env, "MNK_SECRET", False),
            log_dir=Path(log_dir) if log_dir else Path.cwd(),
            color=_env_flag(env, "MNK_COLOR", True),
            log_level=env.get("MNK_LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(self, **kwargs) -> GameConfig:
        """Return a copy with non-None overrides applied."""
        changes = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **changes)
