"""
Secret code generation.
Pick 4 different symbols (0..7) in random order. The random source is
Python's secure `secrets.randbelow` (OS entropy); tests can pass their own.
"""

import logging
from secrets import randbelow
from typing import Callable, List

from .types import CODE_LENGTH, NUM_SYMBOLS, Code, Symbol

log = logging.getLogger(__name__)

RandBelow = Callable[[int], int]


def generate_code(rand_below: RandBelow = randbelow) -> Code:
    used = [False] * NUM_SYMBOLS
    symbols: List[Symbol] = []

    # Keep drawing until we have enough unused symbols.
    # With 8 symbols and 4 slots the expected number of draws is small.
    draws = 0
    while len(symbols) < CODE_LENGTH:
        value = rand_below(NUM_SYMBOLS)
        draws += 1
        if not used[value]:
            used[value] = True
            symbols.append(Symbol(value))

    log.debug("generated secret in %d draws", draws)
    return tuple(symbols)
