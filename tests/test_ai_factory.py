import pytest

from gomoku_engine.ai import (
    AIFactory,
    DefensiveAI,
    MinimaxAI,
    PatternAI,
    RandomAI,
    ScoreHeuristicAI,
    SmartAI,
    get_all_difficulties,
    get_difficulty_description,
    get_difficulty_profile,
    get_think_time_for_difficulty,
    select_ai_type,
)
from gomoku_engine.ai.base import BaseAI
from gomoku_engine.models import AIConfig, AIType, DifficultyLevel, Side


def test_select_ai_type():
    assert select_ai_type(1) == AIType.RANDOM
    assert select_ai_type(2) == AIType.DEFENSIVE
    assert select_ai_type(3) == AIType.SMART
    assert select_ai_type(4) == AIType.MINIMAX
    assert select_ai_type(5) == AIType.SCORE_HEURISTIC
    assert select_ai_type(6) == AIType.PATTERN


def test_difficulty_profile_clamping():
    """Out-of-range difficulties are clamped into [1, 6] consistently."""
    assert get_difficulty_profile(0) == get_difficulty_profile(1)
    assert get_difficulty_profile(99) == get_difficulty_profile(6)


def test_profiles_cover_every_level():
    profiles = get_all_difficulties()
    assert set(profiles) == {int(level) for level in DifficultyLevel}
    assert len({p["profile_id"] for p in profiles.values()}) == len(profiles)
    for level in DifficultyLevel:
        assert get_think_time_for_difficulty(level) == 300
        assert get_difficulty_description(level)


@pytest.mark.parametrize(
    "difficulty,expected_class",
    [
        (1, RandomAI),
        (2, DefensiveAI),
        (3, SmartAI),
        (4, MinimaxAI),
        (5, ScoreHeuristicAI),
        (6, PatternAI),
    ],
)
def test_create_from_difficulty(difficulty, expected_class):
    ai = AIFactory.create_from_difficulty(difficulty, rng_seed=5)
    assert type(ai) is expected_class
    assert ai.side is Side.AUTOMATED
    assert ai.opponent is Side.HUMAN
    assert ai.config.difficulty == difficulty
    assert ai.rng_seed == 5


def test_create_from_difficulty_passes_search_settings():
    ai = AIFactory.create_from_difficulty(4, search_depth=1, candidate_radius=1)
    assert isinstance(ai, MinimaxAI)
    assert ai.max_depth == 1
    assert ai.radius == 1


def test_seed_fallback_differs_per_side():
    config = AIConfig(difficulty=1)
    human = AIFactory.create(AIType.RANDOM, Side.HUMAN, config)
    automated = AIFactory.create(AIType.RANDOM, Side.AUTOMATED, config)
    assert human.rng_seed != automated.rng_seed


def test_package_exports_resolve():
    import gomoku_engine.ai as ai_package

    for name in ai_package.__all__:
        assert getattr(ai_package, name) is not None
    assert issubclass(ai_package.PatternAI, BaseAI)


def test_strategy_classes_are_cached_after_first_use():
    first = AIFactory._get_ai_class(AIType.PATTERN)
    assert AIFactory._class_cache[AIType.PATTERN] is first
    assert AIFactory._get_ai_class(AIType.PATTERN) is first


def test_unknown_ai_type_string():
    with pytest.raises(ValueError):
        AIFactory.create("alpha_beta", Side.AUTOMATED, AIConfig(difficulty=1))
