# dotrepl.repl.repl - Main REPL implementation
"""
Interactive read-eval-print loop.
"""
import logging
import sys
import traceback
from enum import Enum, auto
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

from dotrepl.completion import CompletionEngine
from dotrepl.repl.accumulator import PROMPT_BLOCK, PROMPT_MAIN, LineAccumulator
from dotrepl.runtime import NO_VALUE, Interpreter, PythonValueModel
from dotrepl.scanner import KEYWORDS
from dotrepl.version import __version__

logger = logging.getLogger(__name__)


class SessionControl(Enum):
    """What the read-loop does after a statement."""

    CONTINUE = auto()
    TERMINATE = auto()


class Terminal(Protocol):
    def read_line(self, prompt: str, preload: str = "") -> str:
        ...

    def show_result(self, text: Optional[str]) -> None:
        ...

    def show_message(self, text: str) -> None:
        ...


class Repl:
    """
    Interactive REPL over a persistent main module.

    Features:
    - Multi-line statements with block detection
    - Tab completion of dotted names
    - Result printing bound to _
    - A session log of captured lines in history
    - Script execution through the same statement rules
    """

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        interpreter: Optional[Interpreter] = None,
        history_file: Optional[Path] = None,
        prompt: str = PROMPT_MAIN,
        block_prompt: str = PROMPT_BLOCK,
        highlight: bool = True,
        completion: bool = True,
        extra_keywords: Sequence[str] = (),
        label: str = "<stdin>",
    ):
        """
        Initialize REPL.

        Args:
            terminal: Line source and output; a prompt_toolkit terminal is
                created when omitted
            interpreter: Interpreter to run statements in
            history_file: History file path for the default terminal
            prompt: Primary prompt
            block_prompt: Continuation prompt
            highlight: Highlight input in the default terminal
            completion: Bind Tab completion in the default terminal
            extra_keywords: Names offered after the language keywords
            label: Source label for executed statements
        """
        self.interpreter = interpreter or Interpreter()
        self.model = PythonValueModel()
        self.engine = CompletionEngine(
            self.interpreter.module,
            self.interpreter.builtins,
            self.model,
            keywords=[*KEYWORDS, *extra_keywords],
        )
        self.prompt = prompt
        self.block_prompt = block_prompt
        self.label = label

        # Session log of every captured line, in order. Line recall at the
        # prompt is served by the terminal's own prompt_toolkit history.
        self.history: list[str] = []
        # Statements that raised
        self.failures = 0
        # Argument of the exit() call that ended the session, if any
        self.exit_requested = False
        self.exit_code = None

        if terminal is None:
            from dotrepl.repl.terminal import PromptTerminal

            terminal = PromptTerminal(
                engine=self.engine if completion else None,
                history_file=history_file,
                highlight=highlight,
            )
        self.terminal = terminal

    def run(self) -> None:
        """Run the REPL until end of input or exit()."""
        self.terminal.show_message(self._get_banner())

        while True:
            acc = self.read_statement()
            if acc.at_eof:
                break
            if not acc.valid:
                continue
            if self.execute(acc.statement) is SessionControl.TERMINATE:
                break

    def read_statement(self) -> LineAccumulator:
        """
        Read lines until one statement is complete or abandoned.

        Returns:
            The finished accumulator
        """
        acc = LineAccumulator(self.history, self.prompt, self.block_prompt)
        while not acc.finished:
            try:
                line = self.terminal.read_line(acc.prompt, acc.preload)
            except KeyboardInterrupt:
                self.terminal.show_message("KeyboardInterrupt")
                acc.interrupt()
                break
            acc.feed(line)
        return acc

    def execute(self, source: str) -> SessionControl:
        """
        Execute a complete statement and print its result.

        Faults raised by the statement are reported with a traceback on
        stderr; only exit() ends the session.

        Args:
            source: Statement text

        Returns:
            SessionControl for the read-loop
        """
        logger.debug("submitting %r", source)
        try:
            result = self.interpreter.execute(source, self.label)
        except SystemExit as e:
            self.exit_requested = True
            self.exit_code = e.code
            return SessionControl.TERMINATE
        except KeyboardInterrupt:
            self.terminal.show_message("KeyboardInterrupt")
            self.failures += 1
            return SessionControl.CONTINUE
        except Exception:
            self._report_fault()
            self.failures += 1
            return SessionControl.CONTINUE

        self.print_result(result)
        return SessionControl.CONTINUE

    def print_result(self, result: Any) -> None:
        """Show a result and bind it to _, unless there is none."""
        if result is NO_VALUE:
            return
        self.interpreter.bind_result(result)
        self.terminal.show_result(self.model.represent(result))

    def _report_fault(self) -> None:
        exc_type, exc, tb = sys.exc_info()
        # Drop the interpreter's own frames
        while tb is not None and tb.tb_frame.f_code.co_filename != self.label:
            tb = tb.tb_next
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)

    def execute_script(self, script_path: Path) -> int:
        """
        Execute a script file statement by statement.

        Lines go through the same accumulator rules as interactive input,
        so blocks must end with a blank line.

        Args:
            script_path: Path to the script

        Returns:
            Number of statements that failed
        """
        if not script_path.exists():
            print(f"Script not found: {script_path}", file=sys.stderr)
            return 1

        lines = script_path.read_text().splitlines(keepends=True)
        if lines and not lines[-1].endswith("\n"):
            lines[-1] += "\n"
        # A final blank line closes a trailing block
        lines.append("\n")

        failures_before = self.failures
        acc = LineAccumulator(self.history, self.prompt, self.block_prompt)
        for line in lines:
            acc.feed(line)
            if not acc.finished:
                continue
            if acc.valid:
                if self.execute(acc.statement) is SessionControl.TERMINATE:
                    break
            acc = LineAccumulator(self.history, self.prompt, self.block_prompt)

        return self.failures - failures_before

    def _get_banner(self) -> str:
        """Get welcome banner."""
        return f"dotrepl v{__version__} (Python {sys.version.split()[0]})\nCall exit() or press Ctrl-D to leave"
