"""
501 Countdown - Available-Input Projection

Decides which keypad buttons the input surface may offer next. This is the
real gatekeeper of input legality: the parser only checks syntax, so a buffer
can only hold a board segment if the keypad never offered anything else.

The projection depends on the pending buffer alone, never on scores or turn.
"""

from src.engine.base import (
    ALL_BUTTONS,
    CONFIRM,
    DIGIT_BUTTONS,
    DOUBLE,
    TRIPLE,
    UNDO,
    VALID_BASE_SCORES,
)

EMPTY_BUFFER_BUTTONS: frozenset[str] = frozenset(DIGIT_BUTTONS) | {UNDO}
FULL_KEYPAD: frozenset[str] = frozenset(ALL_BUTTONS)
# "2" can only grow into 20 or 25
AFTER_TWO_BUTTONS: frozenset[str] = frozenset({"0", "5", DOUBLE, TRIPLE, CONFIRM, UNDO})
SEGMENT_BUTTONS: frozenset[str] = frozenset({DOUBLE, TRIPLE, CONFIRM, UNDO})
DEAD_END_BUTTONS: frozenset[str] = frozenset({CONFIRM, UNDO})


def available_tokens(buffer: str) -> frozenset[str]:
    """
    Buttons the player may press with the given pending buffer.

    Args:
        buffer: Pending, not yet confirmed input

    Returns:
        Set of button labels
    """
    if not buffer:
        return EMPTY_BUFFER_BUTTONS
    if buffer == "1":
        return FULL_KEYPAD
    if buffer == "2":
        return AFTER_TWO_BUTTONS
    if buffer.isascii() and buffer.isdigit() and int(buffer) in VALID_BASE_SCORES:
        return SEGMENT_BUTTONS
    return DEAD_END_BUTTONS


def ordered_tokens(tokens: frozenset[str] | set[str]) -> list[str]:
    """Sort button labels into keypad order for rendering."""
    return [button for button in ALL_BUTTONS if button in tokens]
