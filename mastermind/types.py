"""
Labels for clarity.
"""

from enum import IntEnum
from typing import Literal, Sequence, Tuple


class Symbol(IntEnum):
    """The 8 peg colors. The value is the alphabet position (0 -> 7)."""

    RED = 0
    BLUE = 1
    GREEN = 2
    YELLOW = 3
    PURPLE = 4
    ORANGE = 5
    WHITE = 6
    CYAN = 7


CODE_LENGTH = 4
MAX_ATTEMPTS = 10
NUM_SYMBOLS = len(Symbol)

Code = Tuple[Symbol, ...]  # 4 distinct symbols
CodeLike = Sequence[int]  # anything the engine can score
RoundStatus = Literal["in_progress", "won", "lost", "aborted"]
DisplayMode = Literal["blocks", "numbers"]
