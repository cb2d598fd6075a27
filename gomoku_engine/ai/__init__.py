"""Move-selection strategies for the automated side.

The recommended entry point is the factory:

    from gomoku_engine.ai import AIFactory

    ai = AIFactory.create_from_difficulty(difficulty=4)
    position = ai.select_move(board)

Architecture:
- base.py: BaseAI abstract base class and the center-bias fallback
- factory.py: difficulty profiles and AIFactory
- evaluation.py: evaluate_board / evaluate_position scorers
- random_ai.py, defensive_ai.py, smart_ai.py: rule-of-thumb levels 1-3
- minimax_ai.py: two-ply search over neighbourhood candidates
- score_ai.py: weighted positional scoring
- pattern_ai.py, patterns.py: line-pattern matching
"""

from gomoku_engine.ai.base import BaseAI, center_bias_move
from gomoku_engine.ai.evaluation import evaluate_board, evaluate_position
from gomoku_engine.ai.factory import (
    CANONICAL_DIFFICULTY_PROFILES,
    AIFactory,
    DifficultyProfile,
    get_all_difficulties,
    get_difficulty_description,
    get_difficulty_profile,
    get_think_time_for_difficulty,
    select_ai_type,
)

# Lazy-load AI implementations
_AI_CLASSES = {
    "DefensiveAI": "gomoku_engine.ai.defensive_ai",
    "MinimaxAI": "gomoku_engine.ai.minimax_ai",
    "PatternAI": "gomoku_engine.ai.pattern_ai",
    "RandomAI": "gomoku_engine.ai.random_ai",
    "ScoreHeuristicAI": "gomoku_engine.ai.score_ai",
    "SmartAI": "gomoku_engine.ai.smart_ai",
}


def __getattr__(name: str):
    """Lazy loading for AI implementation classes."""
    if name in _AI_CLASSES:
        import importlib
        module = importlib.import_module(_AI_CLASSES[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CANONICAL_DIFFICULTY_PROFILES",
    "AIFactory",
    "BaseAI",
    "DefensiveAI",
    "DifficultyProfile",
    "MinimaxAI",
    "PatternAI",
    "RandomAI",
    "ScoreHeuristicAI",
    "SmartAI",
    "center_bias_move",
    "evaluate_board",
    "evaluate_position",
    "get_all_difficulties",
    "get_difficulty_description",
    "get_difficulty_profile",
    "get_think_time_for_difficulty",
    "select_ai_type",
]
