"""User-configurable game settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from checkie.core.enums import Color

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Rules
    first_player: Color = Color.WHITE

    # Input
    lenient_squares: bool = True  # accept tokens such as "B6," as b6

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameSettings:
        """Read ``CHECKIE_*`` overrides from the environment."""
        env = os.environ if environ is None else environ
        settings = cls()

        first = env.get("CHECKIE_FIRST_PLAYER")
        if first is not None:
            try:
                settings.first_player = Color[first.strip().upper()]
            except KeyError:
                raise ValueError(f"Invalid CHECKIE_FIRST_PLAYER: {first!r}") from None

        lenient = env.get("CHECKIE_LENIENT_SQUARES")
        if lenient is not None:
            value = lenient.strip().lower()
            if value in _TRUE_VALUES:
                settings.lenient_squares = True
            elif value in _FALSE_VALUES:
                settings.lenient_squares = False
            else:
                raise ValueError(f"Invalid CHECKIE_LENIENT_SQUARES: {lenient!r}")

        level = env.get("CHECKIE_LOG_LEVEL")
        if level:
            name = level.strip().upper()
            # getLevelName maps a registered name to its number
            if not isinstance(logging.getLevelName(name), int):
                raise ValueError(f"Invalid CHECKIE_LOG_LEVEL: {level!r}")
            settings.log_level = name

        return settings
