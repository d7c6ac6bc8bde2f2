"""
501 Countdown - Pending Turn Row

Projects the current turn onto three display slots: committed throws first,
then the throw being typed, then placeholders.
"""

from typing import Sequence

from src.engine.base import PLACEHOLDER, THROWS_PER_TURN


def pending_row(
    turn_throws: Sequence[str],
    throws_in_turn: int,
    pending_input: str,
) -> tuple[str, ...]:
    """
    Build the three-slot row for the current turn.

    Args:
        turn_throws: Tokens committed this turn, in order
        throws_in_turn: Number of committed throws this turn
        pending_input: Buffer being typed for the next throw

    Returns:
        Tuple of exactly three strings, "-" for empty slots
    """
    row = [PLACEHOLDER] * THROWS_PER_TURN

    for index, token in enumerate(turn_throws[:THROWS_PER_TURN]):
        row[index] = token

    if pending_input and throws_in_turn < THROWS_PER_TURN:
        row[throws_in_turn] = pending_input

    return tuple(row)
