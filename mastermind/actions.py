"""
What the player can do at the guess prompt, as a tagged value.

- GuessAction: a well formed code, ready for Round.submit_guess
- ToggleDisplay: 'r' switches between color blocks and numbers
- Abort: 'q' leaves the game
- InvalidInput: anything else; carries the message to show the player
"""

from dataclasses import dataclass
from typing import Union

from .errors import GuessValidationError, ValidationRule
from .types import Code
from .validation import parse_guess

TOGGLE_KEYS = ("r", "R")
ABORT_KEYS = ("q", "Q")


@dataclass(frozen=True)
class GuessAction:
    code: Code


@dataclass(frozen=True)
class ToggleDisplay:
    pass


@dataclass(frozen=True)
class Abort:
    pass


@dataclass(frozen=True)
class InvalidInput:
    message: str
    rule: ValidationRule


PlayerAction = Union[GuessAction, ToggleDisplay, Abort, InvalidInput]


def read_action(text: str) -> PlayerAction:
    # Control keys only look at the first character, like "quit" or "redraw"
    key = text.strip()[:1]
    if key in ABORT_KEYS:
        return Abort()
    if key in TOGGLE_KEYS:
        return ToggleDisplay()

    try:
        return GuessAction(parse_guess(text))
    except GuessValidationError as err:
        return InvalidInput(err.message, err.rule)
