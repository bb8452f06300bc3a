"""Runtime settings for the command-line front end."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from kingside.core.notation import STARTING_FEN

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(slots=True, frozen=True)
class Settings:
    """All user-configurable settings."""

    # Logging
    log_level: str = "WARNING"

    # Board rendering
    unicode_pieces: bool = False

    # Game
    start_fen: str = STARTING_FEN

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Defaults overridden by ``KINGSIDE_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        level = env.get("KINGSIDE_LOG_LEVEL")
        if level:
            settings = replace(settings, log_level=level.upper())
        unicode_flag = env.get("KINGSIDE_UNICODE")
        if unicode_flag:
            settings = replace(
                settings, unicode_pieces=unicode_flag.strip().lower() in _TRUTHY
            )
        start_fen = env.get("KINGSIDE_START_FEN")
        if start_fen:
            settings = replace(settings, start_fen=start_fen.strip())
        return settings


def configure_logging(settings: Settings) -> None:
    """Install a root handler at the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
