"""Environment-driven settings for the Gomoku engine.

Settings are read once into a frozen :class:`EngineSettings` so a running
game never observes a half-updated environment. Every value has a default;
the environment only overrides.

Environment variables:
    GOMOKU_DEFAULT_DIFFICULTY   initial difficulty level (1-6, default 3)
    GOMOKU_RNG_SEED             seed for the AIs' random choices (default unset)
    GOMOKU_MINIMAX_DEPTH        search depth of the minimax level (default 2)
    GOMOKU_CANDIDATE_RADIUS     neighbourhood radius for candidate moves (default 2)
    GOMOKU_LOG_LEVEL            logging level name (default INFO)
    GOMOKU_METRICS_ENABLED      record prometheus metrics (default true)

The log level takes effect through
:func:`gomoku_engine.logging_config.configure_from_settings`, which
:class:`~gomoku_engine.game_engine.GameController` calls when it reads the
environment itself.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError
from .models import DifficultyLevel

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_int(env: Mapping[str, str], name: str, default: int | None, minimum: int) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{name} must be an integer", context={"value": raw}
        ) from exc
    if value < minimum:
        raise ConfigurationError(
            f"{name} must be >= {minimum}", context={"value": value}
        )
    return value


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag", context={"value": raw})


@dataclass(frozen=True)
class EngineSettings:
    """Resolved engine settings."""

    default_difficulty: DifficultyLevel = DifficultyLevel.SMART
    rng_seed: int | None = None
    minimax_depth: int = 2
    candidate_radius: int = 2
    log_level: str = "INFO"
    metrics_enabled: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> EngineSettings:
        """Build settings from ``env`` (defaults to ``os.environ``).

        Raises:
            ConfigurationError: If a variable is present but malformed.
        """
        env = os.environ if env is None else env

        difficulty = _read_int(env, "GOMOKU_DEFAULT_DIFFICULTY", int(DifficultyLevel.SMART), 1)
        try:
            level = DifficultyLevel(difficulty)
        except ValueError as exc:
            raise ConfigurationError(
                "GOMOKU_DEFAULT_DIFFICULTY is not a known level",
                context={"value": difficulty},
            ) from exc

        log_level = env.get("GOMOKU_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(
                "GOMOKU_LOG_LEVEL is not a logging level", context={"value": log_level}
            )

        return cls(
            default_difficulty=level,
            rng_seed=_read_int(env, "GOMOKU_RNG_SEED", None, 0),
            minimax_depth=_read_int(env, "GOMOKU_MINIMAX_DEPTH", 2, 1),
            candidate_radius=_read_int(env, "GOMOKU_CANDIDATE_RADIUS", 2, 1),
            log_level=log_level,
            metrics_enabled=_read_bool(env, "GOMOKU_METRICS_ENABLED", True),
        )
