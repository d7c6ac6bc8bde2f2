"""
501 Countdown Observable State.

Scoreboard snapshots, event classification and observer fan-out for the
rendering layer.
"""

from src.realtime.events import EventPayload, GameEvent
from src.realtime.models import Scoreboard
from src.realtime.subscriptions import ObserverRegistry
from src.realtime.sync_manager import MatchSession, create_session

__all__ = [
    "EventPayload",
    "GameEvent",
    "MatchSession",
    "ObserverRegistry",
    "Scoreboard",
    "create_session",
]
