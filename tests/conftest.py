# tests/conftest.py - Pytest configuration
"""
Pytest configuration and shared fixtures.
"""
import pytest

from dotrepl.completion import CompletionEngine
from dotrepl.repl import Repl
from dotrepl.runtime import Interpreter, PythonValueModel


class FakeTerminal:
    """Terminal that replays scripted lines and records output."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts: list[tuple[str, str]] = []
        self.results: list = []
        self.messages: list[str] = []

    def read_line(self, prompt, preload=""):
        self.prompts.append((prompt, preload))
        if not self.lines:
            return ""
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line

    def show_result(self, text):
        self.results.append(text)

    def show_message(self, text):
        self.messages.append(text)


class FakeView:
    """Completion view that records edits."""

    def __init__(self, width=80):
        self.width = width
        self.inserted: list[str] = []
        self.repositioned = 0
        self.listings: list[str] = []

    def insert_text(self, text):
        self.inserted.append(text)

    def reposition_cursor(self):
        self.repositioned += 1

    def show_listing(self, text):
        self.listings.append(text)


@pytest.fixture
def interpreter():
    """Fresh interpreter with an empty main module."""
    return Interpreter()


@pytest.fixture
def engine(interpreter):
    """Completion engine over the interpreter's module."""
    return CompletionEngine(
        interpreter.module,
        interpreter.builtins,
        PythonValueModel(),
    )


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def repl(terminal):
    """REPL wired to a fake terminal."""
    return Repl(terminal=terminal)


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def scripted():
    """Factory for a REPL that reads the given lines."""

    def make(lines):
        terminal = FakeTerminal(lines)
        return Repl(terminal=terminal), terminal

    return make
