"""
Turning player text into a code, and checking codes before they are scored.

Rules (checked in this order):
- exactly 4 characters
- each character is a digit from 1 to 8 (1 -> RED ... 8 -> CYAN)
- no symbol used twice
"""

from typing import List

from .errors import GuessValidationError
from .types import CODE_LENGTH, NUM_SYMBOLS, Code, CodeLike, Symbol


def _range_error() -> GuessValidationError:
    return GuessValidationError(
        "range",
        f"Invalid input. Please enter {CODE_LENGTH} different numbers, ranging from 1 to {NUM_SYMBOLS}.",
    )


def _duplicate_error() -> GuessValidationError:
    return GuessValidationError(
        "duplicate",
        f"Invalid input. Please enter {CODE_LENGTH} different numbers, each color may be used only once.",
    )


def parse_guess(text: str) -> Code:
    """Decode something like "1357" into a code, or raise GuessValidationError."""
    text = text.strip()
    if len(text) != CODE_LENGTH:
        raise GuessValidationError(
            "length",
            f"Please enter {CODE_LENGTH} numbers. You entered {len(text)} characters.",
        )

    symbols: List[Symbol] = []
    for char in text:
        if char < "1" or char > str(NUM_SYMBOLS):
            raise _range_error()
        symbols.append(Symbol(int(char) - 1))

    return validate_code(symbols)


def validate_code(code: CodeLike) -> Code:
    """Check an already decoded code; returns it as a tuple of Symbols."""
    if len(code) != CODE_LENGTH:
        raise GuessValidationError(
            "length",
            f"A code has exactly {CODE_LENGTH} symbols, got {len(code)}.",
        )

    for value in code:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < NUM_SYMBOLS:
            raise _range_error()

    if len(set(code)) != len(code):
        raise _duplicate_error()

    return tuple(Symbol(value) for value in code)
