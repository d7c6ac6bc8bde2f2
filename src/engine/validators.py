"""
501 Countdown - Input Validation Utilities

Provides validation functions for engine configuration and keypad input.
All validators either return validated data or raise descriptive ValueError
exceptions.
"""


def validate_starting_score(score: int) -> int:
    """
    Validate the score each player counts down from.

    Args:
        score: Starting score

    Returns:
        Validated score

    Raises:
        ValueError: If score is not a positive integer
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError(f"Starting score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"Starting score must be positive, got {score}.")

    return score


def validate_player_name(name: str, max_length: int = 30) -> str:
    """
    Validate and normalize a player's display name.

    Args:
        name: Display name
        max_length: Longest name allowed

    Returns:
        The name with surrounding whitespace removed

    Raises:
        ValueError: If the name is empty or too long
    """
    if not isinstance(name, str):
        raise ValueError(f"Player name must be a string, got {type(name).__name__}.")

    stripped = name.strip()
    if not stripped:
        raise ValueError("Player name cannot be empty.")

    if len(stripped) > max_length:
        raise ValueError(f"Player name must be at most {max_length} characters, got {len(stripped)}.")

    return stripped


def validate_button(button: str, valid_buttons: tuple[str, ...] | frozenset[str]) -> str:
    """
    Validate a keypad button label.

    Args:
        button: Label sent by the input surface
        valid_buttons: Labels the engine understands

    Returns:
        Validated label

    Raises:
        ValueError: If the label is not a known button
    """
    if not isinstance(button, str):
        raise ValueError(f"Button must be a string, got {type(button).__name__}.")

    if button not in valid_buttons:
        raise ValueError(f"Unknown button {button!r}.")

    return button
