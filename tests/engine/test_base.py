"""
501 Countdown - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest
from src.engine.base import (
    ALL_BUTTONS,
    VALID_BASE_SCORES,
    GameConfig,
    Multiplier,
    ParsedThrow,
    PlayerId,
    ThrowAction,
)
from src.engine.validators import (
    validate_button,
    validate_player_name,
    validate_starting_score,
)


class TestPlayerId:
    """Tests for PlayerId enum."""

    def test_two_players(self):
        assert len(PlayerId) == 2

    def test_other(self):
        assert PlayerId.ONE.other is PlayerId.TWO
        assert PlayerId.TWO.other is PlayerId.ONE


class TestMultiplier:
    """Tests for Multiplier enum."""

    def test_values(self):
        assert Multiplier.SINGLE.value == 1
        assert Multiplier.DOUBLE.value == 2
        assert Multiplier.TRIPLE.value == 3

    def test_prefixes(self):
        assert Multiplier.SINGLE.prefix == ""
        assert Multiplier.DOUBLE.prefix == "D"
        assert Multiplier.TRIPLE.prefix == "T"

    @pytest.mark.parametrize("prefix,expected", [
        ("D", Multiplier.DOUBLE),
        ("T", Multiplier.TRIPLE),
        ("", None),
        ("S", None),
        ("d", None),
    ])
    def test_from_prefix(self, prefix, expected):
        assert Multiplier.from_prefix(prefix) is expected


class TestConstants:
    def test_valid_base_scores(self):
        assert VALID_BASE_SCORES == frozenset(list(range(1, 21)) + [25])

    def test_keypad_has_fourteen_buttons(self):
        assert len(ALL_BUTTONS) == 14
        assert ALL_BUTTONS[-4:] == ("x2", "x3", "OK", "undo")


class TestParsedThrow:
    """Tests for ParsedThrow dataclass."""

    def test_single_value(self):
        assert ParsedThrow(token="20", base=20).value == 20

    def test_treble_value(self):
        assert ParsedThrow(token="T19", base=19, multiplier=Multiplier.TRIPLE).value == 57

    def test_str_is_token(self):
        assert str(ParsedThrow(token="D8", base=8, multiplier=Multiplier.DOUBLE)) == "D8"

    def test_immutable(self):
        parsed = ParsedThrow(token="5", base=5)
        with pytest.raises(AttributeError):
            parsed.base = 6


class TestThrowAction:
    def test_points(self):
        action = ThrowAction(player=PlayerId.ONE, score_before=501, score_after=441)
        assert action.points == 60

    def test_immutable(self):
        action = ThrowAction(player=PlayerId.ONE, score_before=501, score_after=441)
        with pytest.raises(AttributeError):
            action.score_after = 0


class TestGameConfig:
    """Tests for GameConfig validation."""

    def test_defaults(self):
        config = GameConfig()
        assert config.starting_score == 501
        assert config.player_one_name == "Player 1"
        assert config.player_two_name == "Player 2"

    def test_name_of(self):
        config = GameConfig(player_one_name="Phil", player_two_name="Fallon")
        assert config.name_of(PlayerId.ONE) == "Phil"
        assert config.name_of(PlayerId.TWO) == "Fallon"

    @pytest.mark.parametrize("score", [0, -501])
    def test_non_positive_starting_score(self, score):
        with pytest.raises(ValueError, match="positive"):
            GameConfig(starting_score=score)

    def test_names_are_stripped(self):
        config = GameConfig(player_one_name="  Phil ", player_two_name="Fallon\t")
        assert config.player_one_name == "Phil"
        assert config.player_two_name == "Fallon"

    def test_blank_name(self):
        with pytest.raises(ValueError, match="empty"):
            GameConfig(player_one_name="   ")


class TestValidators:
    """Tests for validation utilities."""

    def test_starting_score_ok(self):
        assert validate_starting_score(301) == 301

    def test_starting_score_rejects_float(self):
        with pytest.raises(ValueError, match="integer"):
            validate_starting_score(501.0)

    def test_starting_score_rejects_bool(self):
        with pytest.raises(ValueError, match="integer"):
            validate_starting_score(True)

    def test_player_name_is_stripped(self):
        assert validate_player_name("  Phil ") == "Phil"

    def test_player_name_too_long(self):
        with pytest.raises(ValueError, match="at most 30"):
            validate_player_name("x" * 31)

    def test_player_name_not_string(self):
        with pytest.raises(ValueError, match="string"):
            validate_player_name(7)

    def test_button_ok(self):
        assert validate_button("OK", ALL_BUTTONS) == "OK"

    @pytest.mark.parametrize("button", ["x4", "↩", "", "10", "ok"])
    def test_unknown_button(self, button):
        with pytest.raises(ValueError, match="Unknown button"):
            validate_button(button, ALL_BUTTONS)

    def test_button_not_string(self):
        with pytest.raises(ValueError, match="string"):
            validate_button(5, ALL_BUTTONS)
