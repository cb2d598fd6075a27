"""Line patterns scored by :class:`~gomoku_engine.ai.pattern_ai.PatternAI`.

Symbols, relative to the AI's own side:

* ``2``: own stone
* ``1``: opponent stone
* ``_``: empty cell
* ``#``: off the board (never appears in a pattern)

Patterns are matched as substrings of a 9-cell window centered on the
candidate cell. The table is ordered and each entry scores at most once per
window.
"""

from __future__ import annotations

OWN = "2"
OPPONENT = "1"
EMPTY = "_"
OFF_BOARD = "#"

# Offsets -4..+4 around the candidate cell
WINDOW_REACH = 4

PATTERN_SCORES: tuple[tuple[str, int], ...] = (
    ("2222_", 10000),  # open four, about to complete five
    ("_1111", 9000),   # opponent four with an open left end
    ("222_2", 8000),   # split four
    ("_111_", 7000),   # opponent open three
    ("22_22", 6000),   # split four, gap in the middle
)
