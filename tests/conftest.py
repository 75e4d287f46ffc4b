"""
- Provide a known secret so tests can win/lose on purpose
- Provide a scripted terminal: a list of lines in, everything printed collected
- Trick: patch `session.generate_code` so Session.run() uses the known secret
"""
import pytest

from mastermind import session as session_module
from mastermind.config import Settings
from mastermind.types import Symbol

# RED BLUE GREEN YELLOW -> typed as "1234"
SECRET = (Symbol.RED, Symbol.BLUE, Symbol.GREEN, Symbol.YELLOW)


class ScriptedTerminal:
    """Stands in for input()/print(). Running out of lines behaves like Ctrl-D."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def fixed_secret(monkeypatch):
    """Every new round in a Session gets SECRET; returns a list of generated secrets."""
    generated = []

    def fake_generate_code():
        generated.append(SECRET)
        return SECRET

    monkeypatch.setattr(session_module, "generate_code", fake_generate_code)
    return generated


@pytest.fixture
def settings():
    # no clear-screen escapes cluttering the captured output
    return Settings(display="numbers", clear_screen=False)


@pytest.fixture
def terminal_factory():
    return ScriptedTerminal
