"""
501 Countdown - Scoreboard Model

Pydantic model of everything the rendering layer reads after an input event.
"""

from pydantic import BaseModel, Field

from src.engine.base import PlayerId
from src.engine.keypad import ordered_tokens
from src.engine.match import MatchEngine


def _player_key(player: PlayerId) -> str:
    return f"player{player.value}"


class Scoreboard(BaseModel):
    """Snapshot of a match engine's observable state."""

    player_names: dict[str, str]
    scores: dict[str, int]
    current_player: PlayerId
    throws_in_turn: int = Field(ge=0, le=3)
    pending_input: str = ""
    pending_row: list[str] = Field(min_length=3, max_length=3)
    available_tokens: list[str] = Field(default_factory=list)
    throw_count: int = Field(default=0, ge=0)
    can_undo: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_engine(cls, engine: MatchEngine) -> "Scoreboard":
        """Capture the engine's current state."""
        return cls(
            player_names={
                _player_key(player): engine.config.name_of(player) for player in PlayerId
            },
            scores={_player_key(player): score for player, score in engine.scores.items()},
            current_player=engine.current_player,
            throws_in_turn=engine.throws_in_turn,
            pending_input=engine.pending_input,
            pending_row=list(engine.pending_row),
            available_tokens=ordered_tokens(engine.available_tokens),
            throw_count=len(engine.history),
            can_undo=engine.can_undo,
        )

    def score_of(self, player: PlayerId) -> int:
        return self.scores[_player_key(player)]

    @property
    def current_player_name(self) -> str:
        return self.player_names[_player_key(self.current_player)]
