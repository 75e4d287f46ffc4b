"""
Text rendering for the terminal.
Every function returns a string; the session decides when to print it.
The display mode is always passed in, nothing here remembers it.
"""

from typing import List

from colorama import Back, Cursor, Fore, Style
from colorama.ansi import clear_screen

from . import __author__, __email__, __url__, __version__
from .schemas import RoundState
from .types import CODE_LENGTH, MAX_ATTEMPTS, NUM_SYMBOLS, CodeLike, DisplayMode, Symbol

CLEAR_SCREEN = clear_screen() + Cursor.POS(1, 1)
RULE = "-" * 40

# colorama has no orange; use the 256-color background directly
_ORANGE_BACK = "\033[48;5;208m"

SYMBOL_BACKGROUNDS = {
    Symbol.RED: Back.RED,
    Symbol.BLUE: Back.BLUE,
    Symbol.GREEN: Back.GREEN,
    Symbol.YELLOW: Back.YELLOW,
    Symbol.PURPLE: Back.MAGENTA,
    Symbol.ORANGE: _ORANGE_BACK,
    Symbol.WHITE: Back.WHITE,
    Symbol.CYAN: Back.CYAN,
}

EXACT_PEG = Fore.GREEN + "+" + Style.RESET_ALL
COLOR_ONLY_PEG = Fore.RED + "-" + Style.RESET_ALL


def symbol_cell(symbol: Symbol, mode: DisplayMode) -> str:
    if mode == "numbers":
        return str(symbol + 1)
    return SYMBOL_BACKGROUNDS[symbol] + "  " + Style.RESET_ALL


def render_code(code: CodeLike, mode: DisplayMode) -> str:
    return " ".join(symbol_cell(Symbol(value), mode) for value in code)


def render_hints(exact: int, color_only: int) -> str:
    return " ".join([EXACT_PEG] * exact + [COLOR_ONLY_PEG] * color_only)


def render_title() -> str:
    return "\n".join([
        "",
        Style.BRIGHT + Fore.GREEN + "             Mastermind" + Style.RESET_ALL,
        "             -----------",
        f"               v{__version__}",
        "",
    ])


def render_board(state: RoundState, mode: DisplayMode) -> str:
    """Title, then one row per attempt slot; unused slots stay empty."""
    lines = [render_title(), "No.   Guess               Hints", RULE]

    # numbers are one column narrower than blocks, pad so hints line up
    gap = " " * (8 if mode == "blocks" else 12)
    for index in range(MAX_ATTEMPTS):
        row = f"{index + 1:2d}    "
        if index < len(state.history):
            entry = state.history[index]
            row += render_code(entry.guess, mode) + gap
            row += render_hints(entry.score.exact, entry.score.color_only)
        lines.append(row.rstrip())
        lines.append(RULE)

    return "\n".join(lines) + "\n"


def render_color_guide(mode: DisplayMode) -> str:
    lines = ["", "Color Guide:"]
    row: List[str] = []
    for symbol in Symbol:
        label = f"{symbol + 1}: {symbol.name.capitalize():<6}"
        if mode == "blocks":
            label = symbol_cell(symbol, mode) + " " + label
        row.append(label)
        if len(row) == 4 or symbol == NUM_SYMBOLS - 1:
            lines.append("  ".join(row))
            row = []
    return "\n".join(lines) + "\n"


def render_prompt() -> str:
    return (
        f"Input {CODE_LENGTH} different colors (1-{NUM_SYMBOLS}), "
        "'r' to switch display mode, or 'q' to exit: "
    )


def render_welcome() -> str:
    return "\n".join([
        "Welcome to Mastermind!",
        f"Try to guess the combination of {CODE_LENGTH} colors out of {NUM_SYMBOLS}.",
        "Hint symbols:",
        f"  {EXACT_PEG} : Correct color and position",
        f"  {COLOR_ONLY_PEG} : Correct color but wrong position",
        "",
    ])


def render_display_changed(mode: DisplayMode) -> str:
    return "Display mode changed to " + ("color blocks" if mode == "blocks" else "numbers") + "."


def render_won(attempts: int) -> str:
    return f"Congratulations! You won in {attempts} attempts."


def render_lost(secret: CodeLike, mode: DisplayMode) -> str:
    return (
        f"Sorry, you didn't guess the correct answer in {MAX_ATTEMPTS} attempts.\n"
        f"The correct answer was: {render_code(secret, mode)}"
    )


def render_version() -> str:
    return "\n".join([
        f"Mastermind Game v{__version__}",
        f"Author: {__author__}",
        f"Email: {__email__}",
        f"Website: {__url__}",
        "Copyright (C) 2024 BigDragonSoft.com",
    ])


def render_usage() -> str:
    return "\n".join([
        "Mastermind Game",
        "",
        "This is a traditional console-based Mastermind game. The rules are as follows:",
        f"1. The game will generate a {CODE_LENGTH}-digit color/number code",
        f"2. The range of colors/numbers is from 1 to {NUM_SYMBOLS}",
        f"3. The player has {MAX_ATTEMPTS} chances to guess the code",
        "4. After each guess, the system will provide hints:",
        "   - Green plus sign (+) indicates both color and position are correct",
        "   - Red minus sign (-) indicates the color is correct but the position is wrong",
        "5. The player needs to gradually guess the correct code based on the hints",
        "6. During the game, you can enter 'r' at any time to switch display mode (color blocks/numbers)",
        "7. During the game, you can enter 'q' at any time to exit the game",
        "",
        "Usage:",
        "  mastermind         Start the game (use color blocks)",
        "  mastermind -n      Start the game (use numbers)",
        "  mastermind -v      Display version information",
        "  mastermind -h      Display this help information",
    ])
