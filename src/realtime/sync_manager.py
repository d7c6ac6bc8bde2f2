"""
501 Countdown - Match Session

Ties a MatchEngine to its observers. Each input event runs to completion on
the engine, then the scoreboard is re-captured, diffed against the previous
snapshot and published as a GameEvent. Observers that prefer polling can read
the snapshot property instead.
"""

from __future__ import annotations

import logging
from typing import Callable

from src.config.settings import Settings, get_settings
from src.engine.match import MatchEngine
from src.realtime.events import EventPayload, classify_scoreboard_change
from src.realtime.models import Scoreboard
from src.realtime.subscriptions import ObserverRegistry

logger = logging.getLogger(__name__)


class MatchSession:
    """Single-writer wrapper around a MatchEngine with publish-on-mutate."""

    def __init__(self, engine: MatchEngine | None = None) -> None:
        self._engine = engine or MatchEngine()
        self._observers = ObserverRegistry()
        self._snapshot = Scoreboard.from_engine(self._engine)

    @property
    def engine(self) -> MatchEngine:
        return self._engine

    @property
    def snapshot(self) -> Scoreboard:
        """Scoreboard as of the last processed input event."""
        return self._snapshot

    def subscribe(self, on_event: Callable[[EventPayload], None]) -> int:
        """Subscribe to state changes. Returns a subscription id."""
        return self._observers.subscribe(on_event)

    def unsubscribe(self, subscription_id: int) -> None:
        self._observers.unsubscribe(subscription_id)

    def press(self, button: str) -> Scoreboard:
        """Feed one keypad event to the engine and publish the outcome.

        Args:
            button: One of "0"-"9", "x2", "x3", "OK" or "undo"

        Returns:
            The scoreboard after the event.
        """
        previous = self._snapshot
        self._engine.press(button)
        current = Scoreboard.from_engine(self._engine)
        self._snapshot = current

        old_record = previous.model_dump()
        record = current.model_dump()
        event = classify_scoreboard_change(button, record, old_record)
        if event is None:
            logger.debug("press %r: no state change", button)
            return current

        logger.debug("press %r: %s", button, event.name)
        self._observers.publish(EventPayload(event=event, button=button, data=record))
        return current

    def press_many(self, buttons: list[str] | tuple[str, ...]) -> Scoreboard:
        """Feed a sequence of keypad events, one at a time."""
        for button in buttons:
            self.press(button)
        return self._snapshot

    def shutdown(self) -> None:
        """Detach every observer."""
        self._observers.clear()


def create_session(settings: Settings | None = None) -> MatchSession:
    """Build a session for a fresh leg from application settings."""
    settings = settings or get_settings()
    engine = MatchEngine(settings.to_game_config())
    logger.info(
        "New leg: %s vs %s from %d",
        engine.config.player_one_name,
        engine.config.player_two_name,
        engine.config.starting_score,
    )
    return MatchSession(engine)
