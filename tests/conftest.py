"""
Shared pytest fixtures for the gomoku_engine tests.

Board fixtures are function-scoped so every test starts from a fresh grid.
"""

from pathlib import Path
import sys
from typing import Callable, Iterable, Tuple

import pytest

# Ensure the repository root is on sys.path so `import gomoku_engine` works
# when pytest is run without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from gomoku_engine.board_manager import Board
from gomoku_engine.config import EngineSettings
from gomoku_engine.game_engine import GameController
from gomoku_engine.models import DifficultyLevel, Side
from tests.helpers import place


@pytest.fixture
def board() -> Board:
    """An empty 15x15 board."""
    return Board()


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory building a board from human and automated stone lists."""

    def _create_board(
        human: Iterable[Tuple[int, int]] = (),
        automated: Iterable[Tuple[int, int]] = (),
    ) -> Board:
        b = Board()
        place(b, Side.HUMAN, human)
        place(b, Side.AUTOMATED, automated)
        return b

    return _create_board


@pytest.fixture
def settings() -> EngineSettings:
    """Deterministic settings with metrics switched off."""
    return EngineSettings(
        default_difficulty=DifficultyLevel.SMART,
        rng_seed=1234,
        metrics_enabled=False,
    )


@pytest.fixture
def controller(settings: EngineSettings) -> GameController:
    return GameController(settings=settings)
