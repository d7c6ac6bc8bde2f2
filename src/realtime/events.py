"""
501 Countdown - Event Definitions

Event types and payloads published to observers after each input event.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a leg."""

    THROW_COMMITTED = auto()
    TURN_SWITCHED = auto()
    THROW_UNDONE = auto()
    TURN_REVERTED = auto()
    INPUT_CHANGED = auto()
    STATE_UPDATED = auto()


@dataclass
class EventPayload:
    """Wrapper for a published state change."""

    event: GameEvent
    button: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


def classify_scoreboard_change(
    button: str | None, record: dict[str, Any], old_record: dict[str, Any]
) -> GameEvent | None:
    """Determine the game event from two scoreboard dumps.

    Returns None when nothing changed.
    """
    if record == old_record:
        return None

    turn_changed = record.get("current_player") != old_record.get("current_player")
    throw_delta = record.get("throw_count", 0) - old_record.get("throw_count", 0)

    if throw_delta > 0:
        return GameEvent.TURN_SWITCHED if turn_changed else GameEvent.THROW_COMMITTED
    if throw_delta < 0:
        return GameEvent.TURN_REVERTED if turn_changed else GameEvent.THROW_UNDONE
    if turn_changed:
        return GameEvent.TURN_SWITCHED
    if record.get("pending_input") != old_record.get("pending_input"):
        return GameEvent.INPUT_CHANGED

    return GameEvent.STATE_UPDATED
