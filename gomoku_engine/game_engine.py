"""Game controller for the Gomoku engine.

:class:`GameController` owns one game's board, move history, undo budget
and status, and is the only surface a UI collaborator talks to. It does not
render, translate clicks or schedule anything: the caller decides when to
run the automated turn (immediately or after a visual delay) and the
result is the same either way.

State machine::

    IN_PROGRESS(active_side) --apply_move--> IN_PROGRESS(other side)
                                         \\-> WON(mover)   five or more
                                          \\-> DRAW        board filled

Every rejected request raises a :class:`~gomoku_engine.errors.GomokuError`
subclass before any state is touched.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple, Union

from . import metrics
from .ai.base import BaseAI
from .ai.factory import AIFactory, select_ai_type
from .board_manager import Board
from .config import EngineSettings
from .errors import (
    ConfigurationError,
    GameAlreadyOverError,
    GomokuError,
    NotYourTurnError,
    OutOfBoundsError,
    UndoUnavailableError,
)
from .history import MoveHistory
from .logging_config import configure_from_settings
from .models import (
    CellState,
    DifficultyLevel,
    GameSnapshot,
    GameStatus,
    Move,
    MoveOutcome,
    Position,
    Side,
)
from .rules import check_win

logger = logging.getLogger(__name__)

PositionLike = Union[Position, Tuple[int, int]]

SIDE_NAMES = {Side.HUMAN: "You", Side.AUTOMATED: "CPU"}


def _to_position(position: PositionLike) -> Position:
    if isinstance(position, Position):
        return position
    x, y = position
    if not Board.in_bounds(x, y):
        raise OutOfBoundsError(x, y)
    return Position(x=x, y=y)


class GameController:
    """One human-versus-computer game on a 15x15 board."""

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        """Start a game with ``settings``.

        Without explicit settings the environment is read and its log level
        is applied to the ``gomoku_engine`` logger.
        """
        if settings is None:
            settings = EngineSettings.from_env()
            configure_from_settings(settings)
        self.settings = settings
        self.board = Board()
        self.history = MoveHistory()
        self.difficulty: DifficultyLevel = self.settings.default_difficulty
        self.active_side: Side = Side.HUMAN
        self.status: GameStatus = GameStatus.IN_PROGRESS
        self.winner: Optional[Side] = None
        # One AI per level so seeded RNG streams continue across turns
        self._ai_instances: dict[DifficultyLevel, BaseAI] = {}

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def apply_human_move(self, position: PositionLike) -> MoveOutcome:
        """Place the human side's stone at ``position``."""
        return self.apply_move(position, Side.HUMAN)

    def run_automated_turn(self) -> MoveOutcome:
        """Ask the current difficulty's strategy for a move and apply it.

        Raises:
            GameAlreadyOverError: If the game has finished.
            NotYourTurnError: If it is the human side's turn.
            NoLegalMoveError: If the board has no empty cell.
        """
        self._require_in_progress()
        if self.active_side is not Side.AUTOMATED:
            raise NotYourTurnError(
                "It is not the automated side's turn",
                context={"active_side": self.active_side.name},
            )

        level = self.difficulty
        ai = self._get_ai(level)
        ai_type = select_ai_type(level).value
        start = time.perf_counter()
        try:
            position = ai.select_move(self.board)
        except GomokuError:
            self._observe_ai_move(ai_type, level, "error", time.perf_counter() - start)
            raise
        self._observe_ai_move(ai_type, level, "ok", time.perf_counter() - start)

        return self.apply_move(position, Side.AUTOMATED)

    def apply_move(self, position: PositionLike, side: Side) -> MoveOutcome:
        """Shared transition for both sides.

        Raises:
            GameAlreadyOverError: If the game has finished.
            NotYourTurnError: If ``side`` is not the active side.
            OutOfBoundsError: If the coordinate is off the grid.
            OccupiedCellError: If the cell already holds a stone.
        """
        self._require_in_progress()
        side = Side(side)
        if side is not self.active_side:
            raise NotYourTurnError(
                f"{side.name} cannot move now",
                context={"active_side": self.active_side.name},
            )

        position = _to_position(position)
        coord = position.to_coordinate()
        self.board.set(coord, side)

        move = Move(position=position, side=side, move_number=len(self.history) + 1)
        self.history.record(move)

        won = check_win(self.board, coord, side)
        if won:
            self.status = GameStatus.WON
            self.winner = side
            logger.info(f"{side.name} wins with {position.to_label()} after {move.move_number} moves")
            self._observe_outcome(f"{side.name.lower()}_won")
        elif self.board.is_full():
            self.status = GameStatus.DRAW
            logger.info("Board full, game drawn")
            self._observe_outcome("draw")
        else:
            self.active_side = side.opponent

        return MoveOutcome(move=move, won=won, status=self.status)

    def undo(self) -> List[Move]:
        """Retract the last two moves and hand the turn back to the human.

        Returns:
            The removed moves, most recent first.

        Raises:
            UndoUnavailableError: If the game is over, the budget is spent
                or fewer than two moves have been played.
        """
        if self.is_over:
            raise UndoUnavailableError(
                "Cannot undo after the game has ended",
                reason="game_over",
                context={"status": self.status.value},
            )

        removed = self.history.rollback(self.board)
        self.active_side = Side.HUMAN
        if self.settings.metrics_enabled:
            metrics.UNDO_USED.inc()
        logger.info(f"Undo used, {self.history.undo_budget} left")
        return removed

    def reset(self) -> None:
        """Start a new game; the selected difficulty is kept."""
        self.board.reset()
        self.history.clear()
        self.active_side = Side.HUMAN
        self.status = GameStatus.IN_PROGRESS
        self.winner = None
        self._ai_instances.clear()
        logger.info("Game reset")

    def set_difficulty(self, level: Union[DifficultyLevel, int]) -> None:
        """Select the strategy used by the next automated turn."""
        try:
            self.difficulty = DifficultyLevel(int(level))
        except ValueError as exc:
            raise ConfigurationError(
                "Unknown difficulty level", context={"level": level}
            ) from exc
        logger.debug(f"Difficulty set to {self.difficulty.name}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def undo_budget(self) -> int:
        return self.history.undo_budget

    @property
    def move_history(self) -> Tuple[Move, ...]:
        return self.history.moves

    def get_cell(self, position: PositionLike) -> CellState:
        return self.board.get(_to_position(position).to_coordinate())

    def move_log(self) -> List[str]:
        """One line per move, e.g. ``"You: H8"``."""
        return [f"{SIDE_NAMES[m.side]}: {m.position.to_label()}" for m in self.history.moves]

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            cells=self.board.to_rows(),
            active_side=self.active_side,
            status=self.status,
            winner=self.winner,
            undo_budget=self.undo_budget,
            difficulty=self.difficulty,
            move_history=list(self.history.moves),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_in_progress(self) -> None:
        if self.is_over:
            raise GameAlreadyOverError(
                "The game is already over",
                context={"status": self.status.value},
            )

    def _get_ai(self, level: DifficultyLevel) -> BaseAI:
        ai = self._ai_instances.get(level)
        if ai is None:
            ai = AIFactory.create_from_difficulty(
                level,
                Side.AUTOMATED,
                rng_seed=self.settings.rng_seed,
                search_depth=self.settings.minimax_depth,
                candidate_radius=self.settings.candidate_radius,
            )
            self._ai_instances[level] = ai
        return ai

    def _observe_ai_move(self, ai_type: str, level: DifficultyLevel, outcome: str, seconds: float) -> None:
        if self.settings.metrics_enabled:
            metrics.observe_ai_move(ai_type, int(level), outcome, seconds)

    def _observe_outcome(self, outcome: str) -> None:
        if self.settings.metrics_enabled:
            metrics.observe_game_outcome(outcome)
