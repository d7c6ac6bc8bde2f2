"""
501 Countdown - Throw Ledger

Last-in, first-out record of committed throws. The ledger is the only source
of truth for undo.
"""

import logging
from typing import Iterator

from src.engine.base import ThrowAction

logger = logging.getLogger(__name__)


class ThrowLedger:
    """Stack of ThrowAction records for one match."""

    def __init__(self) -> None:
        self._actions: list[ThrowAction] = []

    def record(self, action: ThrowAction) -> None:
        """Append a committed throw."""
        self._actions.append(action)
        logger.debug("ledger: recorded %s (%d entries)", action, len(self._actions))

    def pop(self) -> ThrowAction | None:
        """Remove and return the most recent throw, or None when empty."""
        if not self._actions:
            return None
        return self._actions.pop()

    @property
    def last(self) -> ThrowAction | None:
        """Most recent throw without removing it."""
        return self._actions[-1] if self._actions else None

    def __len__(self) -> int:
        return len(self._actions)

    def __bool__(self) -> bool:
        return bool(self._actions)

    def __iter__(self) -> Iterator[ThrowAction]:
        return iter(self._actions)
