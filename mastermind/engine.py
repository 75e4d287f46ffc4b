"""
Pure game logic (no terminal, no state).
We compute two feedback numbers for each guess:
- exact: how many positions hold the same symbol in guess and secret
- color_only: how many more symbols appear in both, once the exact positions
  are taken out (each symbol can be used once per side)

An exact match never also counts toward color_only.
"""

import logging

from .schemas import Score
from .types import CodeLike, NUM_SYMBOLS

log = logging.getLogger(__name__)


def _in_alphabet(value) -> bool:
    return isinstance(value, int) and 0 <= value < NUM_SYMBOLS


def score_guess(secret: CodeLike, guess: CodeLike) -> Score:
    """
    Example:
      secret = [RED, BLUE, GREEN, YELLOW]
      guess  = [RED, GREEN, BLUE, PURPLE]
      exact      = 1  (RED in the first position)
      color_only = 2  (BLUE and GREEN are in the secret, just elsewhere)

    Malformed input does not raise: only the overlapping positions are
    compared and values outside the alphabet are left out of the tallies.
    """

    n = min(len(secret), len(guess))
    if n != len(secret) or n != len(guess):
        log.debug("scoring codes of different lengths: %d vs %d", len(secret), len(guess))

    # 1. Exact matches, tallying the leftovers of each side per symbol
    exact = 0
    secret_counts = [0] * NUM_SYMBOLS
    guess_counts = [0] * NUM_SYMBOLS

    i = 0
    while i < n:
        if secret[i] == guess[i]:
            exact += 1
        else:
            if _in_alphabet(secret[i]):
                secret_counts[secret[i]] += 1
            if _in_alphabet(guess[i]):
                guess_counts[guess[i]] += 1
        i += 1

    # 2. Overlap of the leftovers is the sum of the smaller count per symbol
    color_only = 0
    symbol = 0
    while symbol < NUM_SYMBOLS:
        color_only += min(secret_counts[symbol], guess_counts[symbol])
        symbol += 1

    return Score(exact=exact, color_only=color_only)


def is_win(secret: CodeLike, guess: CodeLike) -> bool:
    """
    Win = every symbol matches in order.
    """
    if len(secret) == 0 or len(guess) != len(secret):
        return False
    return tuple(secret) == tuple(guess)
