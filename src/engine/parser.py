"""
501 Countdown - Throw Input Parser

Turns the keypad buffer into a throw. The buffer grows one keystroke at a time:
digits are appended, multipliers are prepended as a "D" or "T" prefix.

Parsing is purely syntactic apart from rejecting a triple bull. Whether a
segment number exists on the board is decided by the available-input
projection (see src.engine.keypad), which limits what can be typed.

All methods are stateless class methods; the buffer is passed in and returned.
"""

import logging

from src.engine.base import BULL, Multiplier, ParsedThrow

logger = logging.getLogger(__name__)


def _is_number(text: str) -> bool:
    """True for a non-empty string of ASCII digits."""
    return text.isascii() and text.isdigit()


class InputParser:
    """Stateless parser and keystroke accumulator for throw tokens."""

    @classmethod
    def parse(cls, raw: str) -> ParsedThrow | None:
        """Parse a throw token.

        Args:
            raw: Buffer contents, e.g. "20", "D16", "T19"

        Returns:
            ParsedThrow, or None if the token is invalid
        """
        if not raw:
            return None

        if _is_number(raw):
            return ParsedThrow(token=raw, base=int(raw))

        multiplier = Multiplier.from_prefix(raw[0])
        if multiplier is None:
            return None

        number = raw[1:]
        if not _is_number(number):
            return None

        base = int(number)
        if base == BULL and multiplier is Multiplier.TRIPLE:
            logger.debug("parse: triple bull %r rejected", raw)
            return None

        return ParsedThrow(token=raw, base=base, multiplier=multiplier)

    @classmethod
    def score(cls, raw: str) -> int | None:
        """Points for a throw token, or None if it does not parse."""
        parsed = cls.parse(raw)
        return parsed.value if parsed is not None else None

    @classmethod
    def press_digit(cls, buffer: str, digit: str) -> str:
        """Append a digit to the buffer."""
        return buffer + digit

    @classmethod
    def press_multiplier(cls, buffer: str, multiplier: Multiplier) -> str:
        """Prefix the buffer with a multiplier.

        An empty buffer is left alone. A buffer that already carries a prefix
        gets another one ("D5" -> "DD5"), which then fails to parse.
        """
        if not buffer:
            return buffer
        return multiplier.prefix + buffer
