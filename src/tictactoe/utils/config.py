"""
Configuration and defaults.
"""

import logging
import os
from typing import Mapping, Optional

from tictactoe.core.types import BOARD_SIZE, Mark


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

# Players in turn order
PLAYERS = (Mark.CROSS, Mark.NAUGHT)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

ENV_LOG_LEVEL = "TICTACTOE_LOG_LEVEL"
ENV_HUMAN_MARK = "TICTACTOE_HUMAN_MARK"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Runtime configuration with sensible defaults."""

    def __init__(
        self,
        human_mark: Mark = Mark.CROSS,
        log_level: str = "WARNING",
    ):
        if human_mark not in PLAYERS:
            raise ValueError(f"Human must play one of {[m.glyph for m in PLAYERS]}, got {human_mark!r}")

        level = log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}. Available: {', '.join(LOG_LEVELS)}")

        self.board_size = BOARD_SIZE
        self.human_mark = human_mark
        self.log_level = level

        # Derive dependent values
        self.engine_mark = PLAYERS[1] if human_mark == PLAYERS[0] else PLAYERS[0]

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from TICTACTOE_* environment variables."""
        env = os.environ if environ is None else environ

        kwargs = {}
        if env.get(ENV_HUMAN_MARK):
            kwargs["human_mark"] = Mark.from_glyph(env[ENV_HUMAN_MARK])
        if env.get(ENV_LOG_LEVEL):
            kwargs["log_level"] = env[ENV_LOG_LEVEL]

        return cls(**kwargs)


# Default configuration
DEFAULT_CONFIG = Config()
