"""
Interactive play loop.

One Session lives for the whole process and owns the display mode.
Each round gets a fresh Round (and a fresh secret); nothing else carries over.
Input and output are injected so tests can script a whole game.
"""

import logging
from typing import Callable, Optional

from . import console
from .actions import Abort, GuessAction, InvalidInput, ToggleDisplay, read_action
from .config import Settings
from .generator import generate_code
from .round import Round
from .types import DisplayMode

log = logging.getLogger(__name__)

ReadLine = Callable[[str], str]  # same contract as input(): prompt in, line out, EOFError at end
Write = Callable[[str], None]

REPLAY_PROMPT = "Do you want to play again? (y/n): "


class Session:
    def __init__(self, settings: Settings, read_line: ReadLine = input, write: Write = print) -> None:
        self.settings = settings
        self.display: DisplayMode = settings.display
        self._read_line = read_line
        self._write = write

    # --- Small I/O helpers ---

    def _ask(self, prompt: str) -> Optional[str]:
        """Next line from the player, or None when input has ended."""
        try:
            return self._read_line(prompt)
        except EOFError:
            log.info("input closed")
            return None

    def _show_board(self, game: Round) -> None:
        if self.settings.clear_screen:
            self._write(console.CLEAR_SCREEN)
        self._write(console.render_board(game.snapshot(), self.display))

    def toggle_display(self) -> DisplayMode:
        self.display = "numbers" if self.display == "blocks" else "blocks"
        return self.display

    # --- Game flow ---

    def run(self) -> int:
        """Play rounds until the player stops. Returns the process exit code."""
        # shown under the first board, so clearing the screen does not hide it
        notice: Optional[str] = console.render_welcome()

        while True:
            game = Round.start(generate_code())
            self.play_round(game, notice)
            notice = None

            if game.status == "aborted":
                self._write("Game exited.")
                return 0

            answer = self._ask(REPLAY_PROMPT)
            if answer is None or answer.strip()[:1] not in ("y", "Y"):
                break

        self._write("Thanks for playing. Goodbye!")
        return 0

    def play_round(self, game: Round, notice: Optional[str] = None) -> Round:
        while not game.is_over:
            self._show_board(game)
            self._write(console.render_color_guide(self.display))
            # messages go after the redraw, right above the prompt
            if notice:
                self._write(notice)
                notice = None

            line = self._ask(console.render_prompt())
            action = Abort() if line is None else read_action(line)

            if isinstance(action, Abort):
                game.abort()
            elif isinstance(action, ToggleDisplay):
                notice = console.render_display_changed(self.toggle_display())
            elif isinstance(action, InvalidInput):
                log.debug("rejected guess (%s)", action.rule)
                notice = action.message
            elif isinstance(action, GuessAction):
                game.submit_guess(action.code)

        if game.status == "won":
            self._show_board(game)
            self._write(console.render_won(game.attempts_used))
        elif game.status == "lost":
            self._show_board(game)
            self._write(console.render_lost(game.reveal_secret(), self.display))

        return game
