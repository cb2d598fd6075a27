from gomoku_engine.errors import (
    GameAlreadyOverError,
    GomokuError,
    InvalidMoveError,
    NoLegalMoveError,
    NotYourTurnError,
    OccupiedCellError,
    RulesViolationError,
    UndoUnavailableError,
)


def test_hierarchy():
    assert issubclass(OccupiedCellError, RulesViolationError)
    assert issubclass(NotYourTurnError, InvalidMoveError)
    assert issubclass(GameAlreadyOverError, InvalidMoveError)
    for error in (RulesViolationError, InvalidMoveError, UndoUnavailableError, NoLegalMoveError):
        assert issubclass(error, GomokuError)


def test_str_includes_code_and_context():
    error = OccupiedCellError(3, 4)
    assert str(error) == "[OCCUPIED_CELL] Cell (3, 4) is already occupied (x=3, y=4)"


def test_str_without_context():
    assert str(NoLegalMoveError("Board full")) == "[NO_LEGAL_MOVE] Board full"


def test_to_dict():
    error = UndoUnavailableError("No undos left", reason="budget")
    assert error.to_dict() == {
        "code": "UNDO_UNAVAILABLE",
        "message": "No undos left",
        "context": {"reason": "budget"},
    }


def test_code_override():
    assert GomokuError("custom", code="CUSTOM").code == "CUSTOM"
