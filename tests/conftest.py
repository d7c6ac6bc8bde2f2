"""
501 Countdown - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable

import pytest

from src.engine.base import GameConfig
from src.engine.match import MatchEngine
from src.realtime.sync_manager import MatchSession


def _keys_for(token: str) -> list[str]:
    """Keypad presses that type and confirm a throw token."""
    multiplier = {"D": "x2", "T": "x3"}.get(token[0])
    digits = token[1:] if multiplier else token
    keys = list(digits)
    if multiplier:
        keys.append(multiplier)
    keys.append("OK")
    return keys


# =============================================================================
# THROW TEST DATA
# =============================================================================

@pytest.fixture
def throw_values() -> dict[str, int]:
    """Throw tokens with their expected points."""
    return {
        "1": 1,
        "7": 7,
        "19": 19,
        "20": 20,
        "25": 25,
        "D1": 2,
        "D16": 32,
        "D20": 40,
        "D25": 50,
        "T1": 3,
        "T19": 57,
        "T20": 60,
    }


@pytest.fixture
def invalid_tokens() -> list[str]:
    """Buffers that never parse."""
    return ["", "D", "T", "T25", "DD5", "TD20", "X20", "2D", "D-5", " 5"]


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine() -> MatchEngine:
    """Fresh 501 leg with default names."""
    return MatchEngine()


@pytest.fixture
def named_engine() -> MatchEngine:
    """Fresh leg with custom names and a short starting score."""
    return MatchEngine(
        GameConfig(starting_score=301, player_one_name="Phil", player_two_name="Fallon")
    )


@pytest.fixture
def session() -> MatchSession:
    """Session wrapping a fresh 501 leg."""
    return MatchSession()


@pytest.fixture
def keys_for() -> Callable[[str], list[str]]:
    """Function mapping a throw token to keypad presses."""
    return _keys_for


@pytest.fixture
def throw() -> Callable[[MatchEngine, str], None]:
    """Function that types and confirms a throw on an engine via the keypad."""

    def _throw(target: MatchEngine, token: str) -> None:
        for key in _keys_for(token):
            target.press(key)

    return _throw
