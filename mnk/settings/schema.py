"""
Settings Schema - The validated {width, height, matches} triple.

Invariants:
- All three values are integers in [1, MAX_DIMENSION]
- matches <= min(width, height)
- Immutable once validated

The engine trusts these invariants and never re-validates them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, model_validator


MAX_DIMENSION = 99


class InvalidSettings(Exception):
    """Raised when settings cannot be read or fail validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or [message]
        super().__init__(message)


class Settings(BaseModel):
    """Board dimensions and win condition for one game."""
    width: int = Field(ge=1, le=MAX_DIMENSION, description="M, board width")
    height: int = Field(ge=1, le=MAX_DIMENSION, description="N, board height")
    matches: int = Field(ge=1, le=MAX_DIMENSION, description="K, tiles in a row to win")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def _matches_fit_board(self) -> Settings:
        if self.matches > min(self.width, self.height):
            raise ValueError("Value of K is larger than the smallest dimension")
        return self

    @property
    def cell_count(self) -> int:
        return self.width * self.height


def make_settings(width: int, height: int, matches: int) -> Settings:
    """
    Build Settings, converting pydantic's ValidationError into InvalidSettings.
    """
    try:
        return Settings(width=width, height=height, matches=matches)
    except ValidationError as e:
        errors = [_describe_error(err) for err in e.errors()]
        raise InvalidSettings("; ".join(errors), errors) from e


def _describe_error(err: dict) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", "invalid value")
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f"{loc}: {msg}" if loc else msg
