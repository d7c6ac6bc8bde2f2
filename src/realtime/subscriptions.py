"""
501 Countdown - Observer Subscription Management

In-process publish/subscribe registry for scoreboard observers. The engine
runs single-threaded; the lock only guards the subscriber table so observers
may subscribe or leave from other threads.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Callable

from src.realtime.events import EventPayload

logger = logging.getLogger(__name__)


class ObserverRegistry:
    """Keeps track of observer callbacks and fans out published events.

    Callbacks run synchronously in the publishing thread, in subscription
    order. A callback that raises is logged and skipped.
    """

    def __init__(self) -> None:
        self._observers: dict[int, Callable[[EventPayload], None]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def subscribe(self, on_event: Callable[[EventPayload], None]) -> int:
        """Register a callback for every published event.

        Args:
            on_event: Callback receiving an EventPayload per state change.

        Returns:
            Subscription id, to pass to unsubscribe().
        """
        with self._lock:
            subscription_id = next(self._ids)
            self._observers[subscription_id] = on_event
        logger.debug("Observer %d subscribed", subscription_id)
        return subscription_id

    def unsubscribe(self, subscription_id: int) -> None:
        """Remove a callback. Unknown ids are ignored."""
        with self._lock:
            removed = self._observers.pop(subscription_id, None)
        if removed is not None:
            logger.debug("Observer %d unsubscribed", subscription_id)

    def publish(self, payload: EventPayload) -> int:
        """Deliver an event to every observer.

        Returns:
            Number of observers that handled the event without raising.
        """
        with self._lock:
            observers = list(self._observers.items())

        delivered = 0
        for subscription_id, on_event in observers:
            try:
                on_event(payload)
                delivered += 1
            except Exception:
                logger.exception(
                    "Observer %d failed handling %s", subscription_id, payload.event.name
                )
        return delivered

    @property
    def active_subscriptions(self) -> list[int]:
        """Return ids of registered observers."""
        with self._lock:
            return list(self._observers.keys())

    def clear(self) -> None:
        """Drop every observer."""
        with self._lock:
            self._observers.clear()
