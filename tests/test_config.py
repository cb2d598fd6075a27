import pytest

from gomoku_engine.config import EngineSettings
from gomoku_engine.errors import ConfigurationError
from gomoku_engine.models import DifficultyLevel


def test_defaults_with_empty_environment():
    settings = EngineSettings.from_env({})
    assert settings == EngineSettings()
    assert settings.default_difficulty is DifficultyLevel.SMART
    assert settings.rng_seed is None
    assert settings.minimax_depth == 2
    assert settings.metrics_enabled


def test_environment_overrides():
    settings = EngineSettings.from_env(
        {
            "GOMOKU_DEFAULT_DIFFICULTY": "6",
            "GOMOKU_RNG_SEED": "17",
            "GOMOKU_MINIMAX_DEPTH": "1",
            "GOMOKU_CANDIDATE_RADIUS": "3",
            "GOMOKU_LOG_LEVEL": "debug",
            "GOMOKU_METRICS_ENABLED": "off",
        }
    )
    assert settings.default_difficulty is DifficultyLevel.PATTERN
    assert settings.rng_seed == 17
    assert settings.minimax_depth == 1
    assert settings.candidate_radius == 3
    assert settings.log_level == "DEBUG"
    assert not settings.metrics_enabled


@pytest.mark.parametrize(
    "env",
    [
        {"GOMOKU_DEFAULT_DIFFICULTY": "7"},
        {"GOMOKU_DEFAULT_DIFFICULTY": "hard"},
        {"GOMOKU_MINIMAX_DEPTH": "0"},
        {"GOMOKU_LOG_LEVEL": "LOUD"},
        {"GOMOKU_METRICS_ENABLED": "maybe"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ConfigurationError):
        EngineSettings.from_env(env)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("GOMOKU_DEFAULT_DIFFICULTY", "1")
    assert EngineSettings.from_env().default_difficulty is DifficultyLevel.RANDOM
