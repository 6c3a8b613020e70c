# dotrepl.repl.accumulator - Multi-line statement assembly
"""
Decides, line by line and from lexical cues only, when a statement typed
at the prompt is complete.
"""
import logging
from enum import Enum, auto
from typing import Optional

logger = logging.getLogger(__name__)

PROMPT_MAIN = ">>> "
PROMPT_BLOCK = "  > "

# Extra indentation pre-filled after a line that opens a block
INDENT_STEP = 4


class BlockState(Enum):
    FRESH = auto()
    IN_PROGRESS = auto()
    COMPLETE = auto()
    ABORTED = auto()


class LineAccumulator:
    """
    Collects physical lines into one logical statement.

    Lines are fed with their trailing newline. Rules, first match wins:

    - no trailing newline: end of input, abort
    - ends with ":": open a block, indent four past this line
    - ends with "\\": continue, indent unchanged
    - inside a block: a blank line is dropped and completes the
      statement, anything else continues at its own indentation
    - starts with "@": continue (decorator)
    - otherwise complete; a blank first line is invalid

    Usage:
        acc = LineAccumulator(history)
        while acc.state in (BlockState.FRESH, BlockState.IN_PROGRESS):
            acc.feed(read(acc.prompt, acc.preload))
        if acc.valid:
            run(acc.statement)
    """

    def __init__(
        self,
        history: Optional[list[str]] = None,
        prompt: str = PROMPT_MAIN,
        block_prompt: str = PROMPT_BLOCK,
    ):
        """
        Initialize accumulator.

        Args:
            history: Session history; captured lines are appended when the
                statement finishes
            prompt: Prompt for the first line
            block_prompt: Prompt for continuation lines
        """
        self.history = history
        self.main_prompt = prompt
        self.block_prompt = block_prompt

        self.lines: list[str] = []
        self.in_block = False
        self.block_indent = 0
        self.valid = True
        self.at_eof = False
        self.state = BlockState.FRESH

    @property
    def finished(self) -> bool:
        return self.state in (BlockState.COMPLETE, BlockState.ABORTED)

    @property
    def prompt(self) -> str:
        return self.block_prompt if self.in_block else self.main_prompt

    @property
    def preload(self) -> str:
        """Indentation pre-filled into the next line."""
        return " " * self.block_indent if self.in_block else ""

    @property
    def statement(self) -> str:
        """Captured lines joined verbatim."""
        return "".join(self.lines)

    def feed(self, line: str) -> BlockState:
        """
        Classify one physical line.

        Args:
            line: Raw line from the terminal, trailing newline included;
                a line without one means end of input

        Returns:
            The state after this line
        """
        if self.finished:
            raise RuntimeError(f"statement already {self.state.name.lower()}")

        if not line.endswith("\n"):
            self.at_eof = True
            return self._finish(BlockState.ABORTED, valid=False)

        first = not self.lines
        self.lines.append(line)

        content = line[:-1]
        spaces = len(content) - len(content.lstrip(" "))
        blank = not content.strip()

        if content.endswith(":"):
            self.in_block = True
            self.block_indent = spaces + INDENT_STEP
        elif content.endswith("\\"):
            self.in_block = True
        elif self.in_block:
            if blank:
                self.lines.pop()
                return self._finish(BlockState.COMPLETE)
            self.block_indent = spaces
        elif content[spaces:].startswith("@"):
            self.in_block = True
            self.block_indent = spaces
        elif blank and first:
            return self._finish(BlockState.ABORTED, valid=False)
        else:
            return self._finish(BlockState.COMPLETE)

        self.state = BlockState.IN_PROGRESS
        return self.state

    def interrupt(self) -> BlockState:
        """Abandon the statement after a keyboard interrupt."""
        return self._finish(BlockState.ABORTED, valid=False)

    def _finish(self, state: BlockState, valid: bool = True) -> BlockState:
        self.state = state
        self.valid = valid
        if self.history is not None:
            self.history.extend(self.lines)
        logger.debug("statement %s after %d line(s)", state.name, len(self.lines))
        return state
