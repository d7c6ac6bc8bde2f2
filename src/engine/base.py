"""
501 Countdown - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Records are immutable (frozen dataclasses); the only mutable
state lives in the match engine's GameState.
"""

from dataclasses import dataclass
from enum import Enum

from src.engine.validators import validate_player_name, validate_starting_score


class PlayerId(Enum):
    """The two seats at the oche."""
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "PlayerId":
        """The opponent of this player."""
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE


class Multiplier(Enum):
    """Segment multiplier applied to a base score."""
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3

    @property
    def prefix(self) -> str:
        """Token prefix for this multiplier ("", "D" or "T")."""
        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Multiplier | None":
        """Look up a multiplier by its token prefix."""
        for multiplier, value in _PREFIXES.items():
            if value and value == prefix:
                return multiplier
        return None


_PREFIXES: dict[Multiplier, str] = {
    Multiplier.SINGLE: "",
    Multiplier.DOUBLE: "D",
    Multiplier.TRIPLE: "T",
}


# Keypad buttons
DIGIT_BUTTONS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8", "9", "0")
DOUBLE = "x2"
TRIPLE = "x3"
CONFIRM = "OK"
UNDO = "undo"

ALL_BUTTONS: tuple[str, ...] = DIGIT_BUTTONS + (DOUBLE, TRIPLE, CONFIRM, UNDO)

MULTIPLIER_BUTTONS: dict[str, Multiplier] = {
    DOUBLE: Multiplier.DOUBLE,
    TRIPLE: Multiplier.TRIPLE,
}

BULL = 25
VALID_BASE_SCORES: frozenset[int] = frozenset(range(1, 21)) | {BULL}

THROWS_PER_TURN = 3
STARTING_SCORE = 501
PLACEHOLDER = "-"


@dataclass(frozen=True)
class ParsedThrow:
    """
    A syntactically valid throw token.

    Attributes:
        token: The raw token, e.g. "T20"
        base: Segment number before the multiplier
        multiplier: Segment multiplier
    """
    token: str
    base: int
    multiplier: Multiplier = Multiplier.SINGLE

    @property
    def value(self) -> int:
        """Points scored by this throw."""
        return self.base * self.multiplier.value

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True)
class ThrowAction:
    """
    Ledger record of one committed throw.

    Only the score delta is stored, not the token, so undoing a throw restores
    the score but cannot put the token back into a previous turn's throws.

    Attributes:
        player: Player who threw
        score_before: Remaining score before the throw
        score_after: Remaining score after the throw
    """
    player: PlayerId
    score_before: int
    score_after: int

    @property
    def points(self) -> int:
        """Points deducted by this throw."""
        return self.score_before - self.score_after


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a single leg.

    Attributes:
        starting_score: Score each player counts down from
        player_one_name: Display name of the first player
        player_two_name: Display name of the second player
    """
    starting_score: int = STARTING_SCORE
    player_one_name: str = "Player 1"
    player_two_name: str = "Player 2"

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_starting_score(self.starting_score)
        object.__setattr__(self, "player_one_name", validate_player_name(self.player_one_name))
        object.__setattr__(self, "player_two_name", validate_player_name(self.player_two_name))

    def name_of(self, player: PlayerId) -> str:
        """Display name for a player."""
        if player is PlayerId.ONE:
            return self.player_one_name
        return self.player_two_name
