"""
501 Countdown Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles throw parsing, keypad gating, scoring, turn switching and undo.
"""

from src.engine.base import (
    GameConfig,
    Multiplier,
    ParsedThrow,
    PlayerId,
    ThrowAction,
)
from src.engine.history import ThrowLedger
from src.engine.keypad import available_tokens
from src.engine.match import GameState, MatchEngine
from src.engine.parser import InputParser

__all__ = [
    # Data Classes
    "GameConfig",
    "GameState",
    "ParsedThrow",
    "ThrowAction",
    # Enums
    "Multiplier",
    "PlayerId",
    # Engine
    "InputParser",
    "MatchEngine",
    "ThrowLedger",
    "available_tokens",
]
