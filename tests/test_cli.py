"""
Testing the command line flags.
- Trick: patch Session in cli so no real terminal game starts.
"""

import pytest

import mastermind.cli as cli
from mastermind.config import Settings


class FakeSession:
    started_with = []

    def __init__(self, settings):
        self.settings = settings

    def run(self):
        FakeSession.started_with.append(self.settings)
        return 0


@pytest.fixture(autouse=True)
def fake_session(monkeypatch):
    FakeSession.started_with = []
    monkeypatch.setattr(cli, "Session", FakeSession)
    # ignore any .env or MASTERMIND_* variables on the machine running the tests
    monkeypatch.setattr(cli, "load_settings", lambda: Settings())
    return FakeSession


def test_version_flag(capsys):
    assert cli.main(["-v"]) == 0

    out = capsys.readouterr().out
    assert "Mastermind Game v0.1.0" in out
    assert "Website:" in out
    assert FakeSession.started_with == []


def test_help_flag(capsys):
    assert cli.main(["-h"]) == 0

    assert "Usage:" in capsys.readouterr().out
    assert FakeSession.started_with == []


def test_no_flags_starts_in_block_mode():
    assert cli.main([]) == 0

    assert FakeSession.started_with[0].display == "blocks"


def test_numbers_flag():
    assert cli.main(["-n"]) == 0

    assert FakeSession.started_with[0].display == "numbers"
