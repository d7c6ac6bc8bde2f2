"""
501 Countdown - Match Engine

Turn state machine for a single two-player leg. Owns the only mutable game
state and exposes it read-only; every change goes through press(),
commit_throw(), switch_turn() or undo_last_action().

Game Rules:
- Both players start on 501 and count down
- A turn is three throws, after which the other player throws
- No bust or double-out rule: a score may go below zero
- Undo reverses the last committed throw, across turn boundaries if needed

Input events never raise. An unparseable confirm, an empty undo or an unknown
button is an identity transition.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from src.engine.base import (
    ALL_BUTTONS,
    CONFIRM,
    DIGIT_BUTTONS,
    MULTIPLIER_BUTTONS,
    THROWS_PER_TURN,
    UNDO,
    GameConfig,
    PlayerId,
    ThrowAction,
)
from src.engine.display import pending_row
from src.engine.history import ThrowLedger
from src.engine.keypad import available_tokens
from src.engine.parser import InputParser
from src.engine.validators import validate_button

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Mutable state of a leg in progress.

    Attributes:
        scores: Remaining points per player
        current_player: Player whose turn it is
        throws_in_turn: Throws committed since the last turn switch (0-3)
        turn_throws: Tokens committed this turn, cleared on switch
        pending_input: Buffer being typed, cleared on confirm and undo
        history: Ledger of committed throws
    """
    scores: dict[PlayerId, int]
    current_player: PlayerId = PlayerId.ONE
    throws_in_turn: int = 0
    turn_throws: list[str] = field(default_factory=list)
    pending_input: str = ""
    history: ThrowLedger = field(default_factory=ThrowLedger)

    @classmethod
    def new(cls, starting_score: int) -> "GameState":
        """Fresh leg: both players on the starting score, player one to throw."""
        return cls(scores={player: starting_score for player in PlayerId})


class MatchEngine:
    """Scoring engine and turn state machine for one 501 leg."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self._state = GameState.new(self._config.starting_score)

    # -- Observable state ------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def scores(self) -> Mapping[PlayerId, int]:
        """Remaining points per player (read-only view)."""
        return MappingProxyType(self._state.scores)

    @property
    def current_player(self) -> PlayerId:
        return self._state.current_player

    @property
    def throws_in_turn(self) -> int:
        return self._state.throws_in_turn

    @property
    def turn_throws(self) -> tuple[str, ...]:
        return tuple(self._state.turn_throws)

    @property
    def pending_input(self) -> str:
        return self._state.pending_input

    @property
    def history(self) -> tuple[ThrowAction, ...]:
        return tuple(self._state.history)

    @property
    def can_undo(self) -> bool:
        return bool(self._state.history)

    @property
    def pending_row(self) -> tuple[str, ...]:
        """Three display slots for the current turn."""
        return pending_row(
            self._state.turn_throws,
            self._state.throws_in_turn,
            self._state.pending_input,
        )

    @property
    def available_tokens(self) -> frozenset[str]:
        """Buttons the input surface may offer next."""
        return available_tokens(self._state.pending_input)

    def score_of(self, player: PlayerId) -> int:
        return self._state.scores[player]

    # -- Input events ----------------------------------------------------

    def press(self, button: str) -> bool:
        """Handle one keypad event.

        Args:
            button: One of "0"-"9", "x2", "x3", "OK" or "undo"

        Returns:
            True if any state changed
        """
        try:
            validate_button(button, ALL_BUTTONS)
        except ValueError as exc:
            logger.warning("press: ignoring %s", exc)
            return False

        logger.debug("press: %r (buffer=%r)", button, self._state.pending_input)

        if button == CONFIRM:
            return self._confirm()
        if button == UNDO:
            return self.undo_last_action()
        if button in MULTIPLIER_BUTTONS:
            return self._set_pending(
                InputParser.press_multiplier(
                    self._state.pending_input, MULTIPLIER_BUTTONS[button]
                )
            )
        if button in DIGIT_BUTTONS:
            return self._set_pending(
                InputParser.press_digit(self._state.pending_input, button)
            )
        return False

    def _confirm(self) -> bool:
        """Commit the pending buffer if it parses; otherwise keep it."""
        token = self._state.pending_input
        if not self.commit_throw(token):
            logger.debug("confirm: invalid input %r, ignoring", token)
            return False
        self._state.pending_input = ""
        return True

    def _set_pending(self, buffer: str) -> bool:
        if buffer == self._state.pending_input:
            return False
        self._state.pending_input = buffer
        return True

    # -- Transitions -----------------------------------------------------

    def commit_throw(self, token: str) -> bool:
        """Score a throw for the current player.

        Deducts the throw from the player's score (no bust protection),
        records it in the ledger and switches turn after the third throw.

        Args:
            token: Throw token, e.g. "T20"

        Returns:
            False if the token does not parse, True otherwise
        """
        parsed = InputParser.parse(token)
        if parsed is None:
            return False

        state = self._state
        player = state.current_player
        score_before = state.scores[player]
        score_after = score_before - parsed.value

        state.turn_throws.append(parsed.token)
        state.history.record(
            ThrowAction(player=player, score_before=score_before, score_after=score_after)
        )
        state.scores[player] = score_after
        state.throws_in_turn += 1
        logger.debug(
            "commit_throw: %s threw %s for %d, %d -> %d",
            player.name, parsed.token, parsed.value, score_before, score_after,
        )

        if state.throws_in_turn == THROWS_PER_TURN:
            logger.debug("commit_throw: three throws reached, switching turn")
            self.switch_turn()

        return True

    def switch_turn(self) -> None:
        """Hand the oche to the other player. Scores and ledger are untouched."""
        state = self._state
        state.current_player = state.current_player.other
        state.throws_in_turn = 0
        state.turn_throws.clear()
        logger.debug("switch_turn: %s to throw", state.current_player.name)

    def undo_last_action(self) -> bool:
        """Reverse the most recent committed throw.

        With no throws yet in the current turn, the throw being undone belongs
        to the previous turn, so the turn is handed back. That turn's token
        list is not rebuilt; its slots stay empty.

        The pending buffer is always cleared.

        Returns:
            True if any state changed
        """
        state = self._state
        had_pending = bool(state.pending_input)
        state.pending_input = ""

        action = state.history.pop()
        if action is None:
            logger.debug("undo_last_action: no actions to undo")
            return had_pending

        state.scores[action.player] = action.score_before
        logger.debug(
            "undo_last_action: restoring %s to %d",
            action.player.name, action.score_before,
        )

        if state.throws_in_turn == 0:
            logger.debug("undo_last_action: no throws in current turn, switching turn")
            self.switch_turn()
        else:
            state.throws_in_turn -= 1
            if state.turn_throws:
                state.turn_throws.pop()

        return True
