# dotrepl.repl.terminal - prompt_toolkit line editor binding
"""
Connects the read-loop and the completion engine to prompt_toolkit.
"""
import sys
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.styles import Style

from dotrepl.completion import CompletionEngine
from dotrepl.repl.highlight import ScannerLexer


class BufferView:
    """The line being edited, as seen by the completion renderer."""

    def __init__(self, event: KeyPressEvent):
        self.event = event

    @property
    def width(self) -> int:
        return self.event.app.output.get_size().columns

    def insert_text(self, text: str) -> None:
        self.event.current_buffer.insert_text(text)

    def reposition_cursor(self) -> None:
        # insert_text already moved the cursor; the next redraw places it
        self.event.app.invalidate()

    def show_listing(self, text: str) -> None:
        run_in_terminal(lambda: print(text, end="", file=sys.stderr))


class PromptTerminal:
    """
    Terminal front-end built on a prompt_toolkit PromptSession.

    Features:
    - Tab completion through a CompletionEngine
    - Persistent line history
    - Input syntax highlighting
    - Pre-filled indentation for continuation lines
    """

    STYLE = Style.from_dict({
        "prompt": "bold",
        "result": "bold ansibrightblack",
        "noresult": "bold ansibrightred",
        "keyword": "ansiblue bold",
        "string": "ansigreen",
        "number": "ansicyan",
        "decorator": "ansimagenta",
        "comment": "ansibrightblack italic",
    })

    def __init__(
        self,
        engine: Optional[CompletionEngine] = None,
        history_file: Optional[Path] = None,
        highlight: bool = True,
    ):
        """
        Initialize terminal.

        Args:
            engine: Completion engine for the Tab key; None disables it
            history_file: File for persistent history (in-memory if None)
            highlight: Highlight input as Python
        """
        self.engine = engine
        self.highlight = highlight
        self.history: History = (
            FileHistory(str(history_file)) if history_file else InMemoryHistory()
        )
        self.session: Optional[PromptSession] = None

    def _key_bindings(self) -> KeyBindings:
        bindings = KeyBindings()
        engine = self.engine
        if engine is None:
            return bindings

        @bindings.add("tab")
        def _complete(event: KeyPressEvent) -> None:
            buffer = event.current_buffer
            engine.handle_tab(buffer.text, buffer.cursor_position, BufferView(event))

        return bindings

    def _create_session(self) -> PromptSession:
        """Create prompt session."""
        return PromptSession(
            history=self.history,
            key_bindings=self._key_bindings(),
            lexer=ScannerLexer() if self.highlight else None,
            style=self.STYLE,
            complete_while_typing=False,
        )

    def read_line(self, prompt: str, preload: str = "") -> str:
        """
        Read one physical line.

        Args:
            prompt: Prompt text
            preload: Text pre-filled into the line (block indentation)

        Returns:
            The line with a trailing newline, or "" at end of input

        Raises:
            KeyboardInterrupt: If the user pressed Ctrl-C
        """
        if self.session is None:
            self.session = self._create_session()
        try:
            text = self.session.prompt([("class:prompt", prompt)], default=preload)
        except EOFError:
            return ""
        return text + "\n"

    def show_result(self, text: Optional[str]) -> None:
        """Print a statement result, or the notice for an unprintable one."""
        if text is None:
            fragments = [("class:noresult", " => Unable to produce representation for value.")]
        else:
            fragments = [("class:result", f" => {text}")]
        print_formatted_text(FormattedText(fragments), style=self.STYLE)

    def show_message(self, text: str) -> None:
        print(text)
