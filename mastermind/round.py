"""
Round state machine.
Holds one round in memory: the secret, the guesses so far and the status.

in_progress --guess wins--------> won
in_progress --10th guess misses-> lost
in_progress --abort()-----------> aborted

won / lost / aborted are final.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .engine import is_win, score_guess
from .errors import InvalidOperationError
from .generator import generate_code
from .schemas import GuessEntry, RoundState
from .types import MAX_ATTEMPTS, Code, CodeLike, RoundStatus
from .validation import validate_code

log = logging.getLogger(__name__)


@dataclass
class Round:
    secret: Code
    status: RoundStatus = field(default="in_progress", init=False)
    _history: List[GuessEntry] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.secret = validate_code(self.secret)
        log.info("new round started")
        log.debug("secret is %s", [s.name for s in self.secret])

    @classmethod
    def start(cls, secret: Optional[CodeLike] = None) -> "Round":
        """New round with a freshly generated secret unless one is given."""
        return cls(secret=tuple(secret) if secret is not None else generate_code())

    # --- Queries ---

    @property
    def history(self) -> Tuple[GuessEntry, ...]:
        return tuple(self._history)

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def attempts_left(self) -> int:
        return MAX_ATTEMPTS - self.attempts_used

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    def reveal_secret(self) -> Code:
        """The secret, once the round has ended."""
        if not self.is_over:
            raise InvalidOperationError("The secret is only revealed once the round is over.")
        return self.secret

    def snapshot(self) -> RoundState:
        return RoundState(
            status=self.status,
            attempts_used=self.attempts_used,
            history=list(self._history),
            secret=self.secret if self.is_over else None,
        )

    # --- Transitions ---

    def submit_guess(self, guess: CodeLike) -> GuessEntry:
        if self.is_over:
            raise InvalidOperationError(f"Round is {self.status}; no more guesses allowed.")

        # Nothing is recorded unless the guess is well formed
        code = validate_code(guess)

        entry = GuessEntry(guess=code, score=score_guess(self.secret, code))
        self._history.append(entry)
        log.debug(
            "attempt %d: exact=%d color_only=%d",
            self.attempts_used, entry.score.exact, entry.score.color_only,
        )

        if is_win(self.secret, code):
            self.status = "won"
            log.info("round won in %d attempts", self.attempts_used)
        elif self.attempts_used >= MAX_ATTEMPTS:
            self.status = "lost"
            log.info("round lost after %d attempts", self.attempts_used)

        return entry

    def abort(self) -> None:
        if self.is_over:
            raise InvalidOperationError(f"Round is already {self.status}.")
        self.status = "aborted"
        log.info("round aborted after %d attempts", self.attempts_used)
