"""Prometheus metrics for the Gomoku engine.

This module centralises counters and histograms so the controller can
record lightweight telemetry about automated turns and finished games
without managing metric instances itself. Hosts that want to expose them
can serve ``prometheus_client.generate_latest()`` however they like.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram


AI_MOVE_REQUESTS: Final[Counter] = Counter(
    "gomoku_ai_move_requests_total",
    "Total automated-turn requests, labeled by ai_type, difficulty and outcome.",
    labelnames=("ai_type", "difficulty", "outcome"),
)

AI_MOVE_LATENCY: Final[Histogram] = Histogram(
    "gomoku_ai_move_latency_seconds",
    "Time spent selecting an automated move, labeled by ai_type and difficulty.",
    labelnames=("ai_type", "difficulty"),
    buckets=(
        0.001,
        0.01,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.0,
        5.0,
    ),
)

GAME_OUTCOMES: Final[Counter] = Counter(
    "gomoku_game_outcomes_total",
    "Finished games, labeled by outcome (human_won, automated_won, draw).",
    labelnames=("outcome",),
)

UNDO_USED: Final[Counter] = Counter(
    "gomoku_undo_used_total",
    "Successful undo operations.",
)


def observe_ai_move(ai_type: str, difficulty: int, outcome: str, seconds: float) -> None:
    """Record one automated turn."""
    AI_MOVE_REQUESTS.labels(ai_type=ai_type, difficulty=str(difficulty), outcome=outcome).inc()
    AI_MOVE_LATENCY.labels(ai_type=ai_type, difficulty=str(difficulty)).observe(seconds)


def observe_game_outcome(outcome: str) -> None:
    GAME_OUTCOMES.labels(outcome=outcome).inc()
