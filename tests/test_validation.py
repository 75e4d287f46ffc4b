"""
Testing how player text becomes a guess.
"""

import pytest

from mastermind.actions import Abort, GuessAction, InvalidInput, ToggleDisplay, read_action
from mastermind.errors import GuessValidationError
from mastermind.types import Symbol
from mastermind.validation import parse_guess, validate_code


def test_parse_guess_maps_digits_to_symbols():
    assert parse_guess("1234") == (Symbol.RED, Symbol.BLUE, Symbol.GREEN, Symbol.YELLOW)
    assert parse_guess(" 8765\n") == (Symbol.CYAN, Symbol.WHITE, Symbol.ORANGE, Symbol.PURPLE)


@pytest.mark.parametrize(
    "text, rule",
    [
        ("123", "length"),
        ("12345", "length"),
        ("", "length"),
        ("1290", "range"),
        ("12a4", "range"),
        ("0123", "range"),
        ("1123", "duplicate"),
        ("8788", "duplicate"),
    ],
)
def test_parse_guess_rejects(text, rule):
    with pytest.raises(GuessValidationError) as excinfo:
        parse_guess(text)
    assert excinfo.value.rule == rule


def test_length_message_says_how_many_characters():
    with pytest.raises(GuessValidationError) as excinfo:
        parse_guess("123")
    assert str(excinfo.value) == "Please enter 4 numbers. You entered 3 characters."


def test_validate_code_rejects_non_symbols():
    with pytest.raises(GuessValidationError):
        validate_code([0, 1, 2, True])
    with pytest.raises(GuessValidationError):
        validate_code([0, 1, 2, "3"])


def test_read_action_tags():
    assert read_action("q") == Abort()
    assert read_action("Quit") == Abort()
    assert read_action("r") == ToggleDisplay()
    assert read_action("R") == ToggleDisplay()
    assert read_action("4321") == GuessAction((Symbol.YELLOW, Symbol.GREEN, Symbol.BLUE, Symbol.RED))

    invalid = read_action("1123")
    assert isinstance(invalid, InvalidInput)
    assert invalid.rule == "duplicate"
    assert "different" in invalid.message


def test_control_keys_ignore_surrounding_whitespace():
    assert read_action(" q") == Abort()
    assert read_action("\tr\n") == ToggleDisplay()
    assert read_action("  ") == InvalidInput("Please enter 4 numbers. You entered 0 characters.", "length")
