"""
Exceptions raised by the game engine.

- GuessValidationError: the player typed something that is not a legal code.
  The session reports it and asks again; no attempt is used.
- InvalidOperationError: the caller drove a Round the wrong way (guessing
  after it ended, peeking at the secret early). Never expected in normal play.
"""

from typing import Literal

ValidationRule = Literal["length", "range", "duplicate"]


class MastermindError(Exception):
    """Base class for everything this package raises on purpose."""


class GuessValidationError(MastermindError, ValueError):
    def __init__(self, rule: ValidationRule, message: str) -> None:
        super().__init__(message)
        self.rule = rule
        self.message = message


class InvalidOperationError(MastermindError, RuntimeError):
    pass
