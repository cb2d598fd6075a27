"""Unified AI Factory for the Gomoku engine.

This module maps difficulty levels onto concrete strategy classes. All AI
creation should go through this factory so the controller, tests and any
host tooling agree on which algorithm a level runs.

Usage:
    from gomoku_engine.ai.factory import AIFactory, get_difficulty_profile

    # Create AI from difficulty level
    ai = AIFactory.create_from_difficulty(difficulty=4)

    # Create AI with explicit type and config
    ai = AIFactory.create(
        ai_type=AIType.PATTERN,
        side=Side.AUTOMATED,
        config=AIConfig(difficulty=6, rng_seed=7),
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict

from gomoku_engine.models import AIConfig, AIType, DifficultyLevel, Side

if TYPE_CHECKING:
    from gomoku_engine.ai.base import BaseAI

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Type definitions
# -----------------------------------------------------------------------------


class DifficultyProfile(TypedDict):
    """Canonical profile for a single difficulty level."""
    ai_type: AIType
    think_time_ms: int
    profile_id: str
    description: str


# -----------------------------------------------------------------------------
# Canonical difficulty profiles (1-6)
# -----------------------------------------------------------------------------

# NOTE: think_time_ms is a pacing hint for the caller that schedules the
# automated turn. The engine never sleeps; select_move returns as soon as
# the strategy finishes.
RESPONSE_DELAY_MS = 300

CANONICAL_DIFFICULTY_PROFILES: dict[int, DifficultyProfile] = {
    DifficultyLevel.RANDOM: {
        "ai_type": AIType.RANDOM,
        "think_time_ms": RESPONSE_DELAY_MS,
        "profile_id": "v1-random-1",
        "description": "Random: plays any empty cell",
    },
    DifficultyLevel.DEFENSIVE: {
        "ai_type": AIType.DEFENSIVE,
        "think_time_ms": RESPONSE_DELAY_MS,
        "profile_id": "v1-defensive-2",
        "description": "Defensive: blocks an immediate five, otherwise random",
    },
    DifficultyLevel.SMART: {
        "ai_type": AIType.SMART,
        "think_time_ms": RESPONSE_DELAY_MS,
        "profile_id": "v1-smart-3",
        "description": "Smart: wins, blocks, then plays toward the center",
    },
    DifficultyLevel.MINIMAX: {
        "ai_type": AIType.MINIMAX,
        "think_time_ms": RESPONSE_DELAY_MS,
        "profile_id": "v1-minimax-4",
        "description": "Minimax: two-ply search near existing stones",
    },
    DifficultyLevel.SCORE_HEURISTIC: {
        "ai_type": AIType.SCORE_HEURISTIC,
        "think_time_ms": RESPONSE_DELAY_MS,
        "profile_id": "v1-score-5",
        "description": "Score: weighs both sides' runs through each cell",
    },
    DifficultyLevel.PATTERN: {
        "ai_type": AIType.PATTERN,
        "think_time_ms": RESPONSE_DELAY_MS,
        "profile_id": "v1-pattern-6",
        "description": "Pattern: matches fours and threes along every line",
    },
}


# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def clamp_difficulty(difficulty: int) -> DifficultyLevel:
    """Clamp ``difficulty`` into the supported ladder."""
    lowest = min(CANONICAL_DIFFICULTY_PROFILES)
    highest = max(CANONICAL_DIFFICULTY_PROFILES)
    return DifficultyLevel(max(lowest, min(highest, int(difficulty))))


def get_difficulty_profile(difficulty: int) -> DifficultyProfile:
    """Return the profile for ``difficulty``.

    Out-of-range values are clamped so every caller gets a well-defined
    profile instead of an error.
    """
    return CANONICAL_DIFFICULTY_PROFILES[clamp_difficulty(difficulty)]


def select_ai_type(difficulty: int) -> AIType:
    return get_difficulty_profile(difficulty)["ai_type"]


def get_think_time_for_difficulty(difficulty: int) -> int:
    """Suggested delay in milliseconds before the caller runs the turn."""
    return get_difficulty_profile(difficulty)["think_time_ms"]


def get_difficulty_description(difficulty: int) -> str:
    return get_difficulty_profile(difficulty)["description"]


def get_all_difficulties() -> dict[int, DifficultyProfile]:
    """Get all canonical difficulty profiles."""
    return CANONICAL_DIFFICULTY_PROFILES.copy()


# -----------------------------------------------------------------------------
# AI Factory
# -----------------------------------------------------------------------------


class AIFactory:
    """Centralized factory for creating AI instances.

    Supports creation by difficulty level or by explicit type. Strategy
    classes are imported lazily on first use.
    """

    # Cache for imported AI classes (lazy loading)
    _class_cache: dict[AIType, type[BaseAI]] = {}

    @classmethod
    def _get_ai_class(cls, ai_type: AIType) -> type[BaseAI]:
        """Get the AI class for a given type, with lazy loading.

        Raises:
            ValueError: If the AI type is not supported
        """
        if ai_type in cls._class_cache:
            return cls._class_cache[ai_type]

        if ai_type == AIType.RANDOM:
            from gomoku_engine.ai.random_ai import RandomAI
            ai_class = RandomAI
        elif ai_type == AIType.DEFENSIVE:
            from gomoku_engine.ai.defensive_ai import DefensiveAI
            ai_class = DefensiveAI
        elif ai_type == AIType.SMART:
            from gomoku_engine.ai.smart_ai import SmartAI
            ai_class = SmartAI
        elif ai_type == AIType.MINIMAX:
            from gomoku_engine.ai.minimax_ai import MinimaxAI
            ai_class = MinimaxAI
        elif ai_type == AIType.SCORE_HEURISTIC:
            from gomoku_engine.ai.score_ai import ScoreHeuristicAI
            ai_class = ScoreHeuristicAI
        elif ai_type == AIType.PATTERN:
            from gomoku_engine.ai.pattern_ai import PatternAI
            ai_class = PatternAI
        else:
            raise ValueError(f"Unsupported AI type: {ai_type}")

        cls._class_cache[ai_type] = ai_class
        return ai_class

    @classmethod
    def create(
        cls,
        ai_type: AIType,
        side: Side,
        config: AIConfig,
    ) -> BaseAI:
        """Create an AI instance with explicit type and configuration."""
        ai_class = cls._get_ai_class(AIType(ai_type))
        return ai_class(side, config)

    @classmethod
    def create_from_difficulty(
        cls,
        difficulty: int,
        side: Side = Side.AUTOMATED,
        *,
        rng_seed: int | None = None,
        search_depth: int = 2,
        candidate_radius: int = 2,
    ) -> BaseAI:
        """Create an AI instance from a difficulty level.

        This is the path the controller uses for every automated turn.

        Args:
            difficulty: Difficulty level (1-6, clamped if out of range)
            side: The side the AI plays
            rng_seed: Optional RNG seed for reproducibility
            search_depth: Plies searched by the minimax level
            candidate_radius: Neighbourhood radius for minimax candidates
        """
        level = clamp_difficulty(difficulty)
        profile = CANONICAL_DIFFICULTY_PROFILES[level]
        config = AIConfig(
            difficulty=int(level),
            rng_seed=rng_seed,
            search_depth=search_depth,
            candidate_radius=candidate_radius,
        )
        logger.debug(f"Creating {profile['ai_type'].value} AI for difficulty {int(level)}")
        return cls.create(profile["ai_type"], side, config)
