"""
Single place to:
- Hold the game constants (color_count, slot_count, max_moves)
- Read overrides from env / a local .env
- Refuse impossible combinations up front, before any session exists

Env vars:
  MASTERMIND_COLOR_COUNT  (default 6)
  MASTERMIND_SLOT_COUNT   (default 4)
  MASTERMIND_MAX_MOVES    (default 10)
  MASTERMIND_SEED_SOURCE  ("clock" or "random.org", default "clock")
  LOG_LEVEL               (default "INFO")
  APP_ENV                 (default "local")
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_COLOR_COUNT = 6
DEFAULT_SLOT_COUNT = 4
DEFAULT_MAX_MOVES = 10

SEED_SOURCES = ("clock", "random.org")


@dataclass(frozen=True)
class GameConfig:
    color_count: int = DEFAULT_COLOR_COUNT
    slot_count: int = DEFAULT_SLOT_COUNT
    max_moves: int = DEFAULT_MAX_MOVES

    def __post_init__(self) -> None:
        if self.slot_count < 1:
            raise ConfigurationError("slot_count must be at least 1.")
        if self.max_moves < 1:
            raise ConfigurationError("max_moves must be at least 1.")
        # The secret uses distinct colors, so there must be enough of them
        if self.slot_count > self.color_count:
            raise ConfigurationError(
                f"slot_count ({self.slot_count}) cannot exceed color_count ({self.color_count})."
            )


@dataclass(frozen=True)
class Settings:
    game: GameConfig = field(default_factory=GameConfig)
    seed_source: str = "clock"
    log_level: str = "INFO"
    app_env: str = "local"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}.")


def load_settings() -> Settings:
    # dev convenience; in prod the platform injects env vars
    load_dotenv()

    game = GameConfig(
        color_count=_int_env("MASTERMIND_COLOR_COUNT", DEFAULT_COLOR_COUNT),
        slot_count=_int_env("MASTERMIND_SLOT_COUNT", DEFAULT_SLOT_COUNT),
        max_moves=_int_env("MASTERMIND_MAX_MOVES", DEFAULT_MAX_MOVES),
    )

    seed_source = os.getenv("MASTERMIND_SEED_SOURCE", "clock")
    if seed_source not in SEED_SOURCES:
        raise ConfigurationError(
            f"MASTERMIND_SEED_SOURCE must be one of {SEED_SOURCES}, got {seed_source!r}."
        )

    return Settings(
        game=game,
        seed_source=seed_source,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_env=os.getenv("APP_ENV", "local"),
    )
