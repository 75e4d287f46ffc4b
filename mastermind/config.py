"""
Single place to:
- Read settings from env (and a local .env if present)
- Validate them with pydantic so a typo fails at startup, not mid-game

Variables:
- MASTERMIND_DISPLAY        "blocks" (default) or "numbers"
- MASTERMIND_CLEAR_SCREEN   clear the terminal before drawing the board (default true)
- MASTERMIND_LOG_LEVEL      logging level name (default WARNING)
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .types import DisplayMode


class Settings(BaseModel):
    display: DisplayMode = Field("blocks", description="How symbols are drawn")
    clear_screen: bool = Field(True, description="Clear the terminal between boards")
    log_level: str = Field("WARNING", description="Root logging level")

    @field_validator("display", mode="before")
    @classmethod
    def normalize_display(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.
    Pass `environ` to read from a plain dict instead (tests do this).
    """
    if environ is None:
        # dev convenience; a .env next to where the game is started
        load_dotenv()
        environ = os.environ

    values = {}
    if environ.get("MASTERMIND_DISPLAY"):
        values["display"] = environ["MASTERMIND_DISPLAY"]
    if environ.get("MASTERMIND_CLEAR_SCREEN"):
        values["clear_screen"] = environ["MASTERMIND_CLEAR_SCREEN"]
    if environ.get("MASTERMIND_LOG_LEVEL"):
        values["log_level"] = environ["MASTERMIND_LOG_LEVEL"]

    return Settings(**values)
