"""
Pydantic models for the data the engine hands to the presentation layer.
- Score: feedback for one guess
- GuessEntry: one row of the board (guess + score)
- RoundState: read-only snapshot of a round, used to render the board
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .types import MAX_ATTEMPTS, RoundStatus, Symbol


# 1. Feedback for a single guess
class Score(BaseModel):
    model_config = ConfigDict(frozen=True)

    exact: int = Field(..., ge=0, description="Right symbol in the right position")
    color_only: int = Field(..., ge=0, description="Right symbol in the wrong position")


# 2. One accepted guess and what it scored
class GuessEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    guess: Tuple[Symbol, ...] = Field(..., description="The player's guess")
    score: Score = Field(..., description="Feedback for the guess")


# 3. Snapshot of a round; the secret is only filled in once the round is over
class RoundState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: RoundStatus = Field(..., description="Current state of the round")
    attempts_used: int = Field(..., ge=0, description="Accepted guesses so far")
    history: List[GuessEntry] = Field(default_factory=list, description="All guesses in order")
    secret: Optional[Tuple[Symbol, ...]] = Field(
        None, description="The secret code (only revealed if the round is over)"
    )

    @computed_field
    @property
    def attempts_left(self) -> int:
        return MAX_ATTEMPTS - self.attempts_used
