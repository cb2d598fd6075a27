"""
Gomoku Engine Error Hierarchy

Unified exception hierarchy for the rule engine and the computer opponent.
All custom exceptions inherit from GomokuError so a UI collaborator can catch
one type and report the failure without touching game state.

Usage:
    from gomoku_engine.errors import GomokuError, OccupiedCellError

    try:
        controller.apply_human_move(Position(x=7, y=7))
    except OccupiedCellError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any

__all__ = [
    # AI errors
    "AIError",
    "ConfigurationError",
    "GameAlreadyOverError",
    # Base error
    "GomokuError",
    "InvalidMoveError",
    "NoLegalMoveError",
    "NotYourTurnError",
    "OccupiedCellError",
    "OutOfBoundsError",
    # Game rules errors
    "RulesViolationError",
    "UndoUnavailableError",
]


class GomokuError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "GOMOKU_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class RulesViolationError(GomokuError):
    """Move that breaks a board rule regardless of whose turn it is."""
    code: str = "RULES_VIOLATION"


class OccupiedCellError(RulesViolationError):
    """Move targets a cell that already holds a stone."""
    code: str = "OCCUPIED_CELL"

    def __init__(self, x: int, y: int, context: dict[str, Any] | None = None):
        super().__init__(f"Cell ({x}, {y}) is already occupied", context=context)
        self.x = x
        self.y = y
        self.context.update({"x": x, "y": y})


class OutOfBoundsError(RulesViolationError):
    """Coordinate lies outside the 15x15 grid."""
    code: str = "OUT_OF_BOUNDS"

    def __init__(self, x: int, y: int):
        super().__init__(f"Cell ({x}, {y}) is off the board", context={"x": x, "y": y})
        self.x = x
        self.y = y


class InvalidMoveError(GomokuError):
    """Move that cannot be applied in the current game state.

    Raised when the cell itself is fine but the state machine refuses the
    transition (wrong side, finished game).
    """
    code: str = "INVALID_MOVE"


class NotYourTurnError(InvalidMoveError):
    """Move submitted for the side that is not active."""
    code: str = "NOT_YOUR_TURN"


class GameAlreadyOverError(InvalidMoveError):
    """Move or undo submitted after the game reached a terminal status."""
    code: str = "GAME_ALREADY_OVER"


class UndoUnavailableError(GomokuError):
    """Undo refused: budget exhausted, game over, or fewer than two moves.

    Attributes:
        reason: Short machine-readable reason ("budget", "game_over", "history")
    """
    code: str = "UNDO_UNAVAILABLE"

    def __init__(self, message: str, reason: str, context: dict[str, Any] | None = None):
        super().__init__(message, context=context)
        self.reason = reason
        self.context["reason"] = reason


# =============================================================================
# AI Errors
# =============================================================================


class AIError(GomokuError):
    """Base class for AI-related errors."""
    code: str = "AI_ERROR"


class NoLegalMoveError(AIError):
    """Strategy invoked on a board with no empty cell."""
    code: str = "NO_LEGAL_MOVE"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GomokuError):
    """Invalid engine setting (usually from the environment)."""
    code: str = "CONFIGURATION_ERROR"
