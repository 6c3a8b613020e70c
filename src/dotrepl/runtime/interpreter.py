# dotrepl.runtime.interpreter - Statement execution
"""
Executes submitted statements in a persistent main module.
"""
import ast
import builtins
import logging
import types
from typing import Any

from dotrepl.runtime.values import NO_VALUE

logger = logging.getLogger(__name__)


def _exit(code: Any = None) -> None:
    """Leave the REPL session."""
    raise SystemExit(code)


class Interpreter:
    """
    Owns the main module that user statements run in.

    Usage:
        interp = Interpreter()
        interp.execute("x = 40\\n", "<stdin>")
        interp.execute("x + 2\\n", "<stdin>")   # -> 42
    """

    def __init__(self, module_name: str = "__main__"):
        self.module = types.ModuleType(module_name)
        self.module.__dict__["__builtins__"] = builtins
        self.module.__dict__["exit"] = _exit
        self.module.__dict__["quit"] = _exit

    @property
    def namespace(self) -> dict:
        return self.module.__dict__

    @property
    def builtins(self) -> types.ModuleType:
        return builtins

    def execute(self, source: str, label: str = "<stdin>") -> Any:
        """
        Run a complete statement.

        A trailing expression statement is evaluated separately so its value
        can be returned, the way an interactive prompt shows results.

        Args:
            source: Statement text, newlines included
            label: Filename shown in tracebacks

        Returns:
            The trailing expression's value, or NO_VALUE when there is none
            or it is None

        Raises:
            Whatever the statement raises, SyntaxError included
        """
        tree = ast.parse(source, label, "exec")
        tail = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            tail = ast.Expression(tree.body.pop().value)

        logger.debug("executing %d statement(s) from %s", len(tree.body) + (tail is not None), label)

        if tree.body:
            exec(compile(tree, label, "exec"), self.namespace)  # noqa: S102
        if tail is None:
            return NO_VALUE

        result = eval(compile(tail, label, "eval"), self.namespace)  # noqa: S307
        return NO_VALUE if result is None else result

    def bind_result(self, value: Any) -> None:
        """Make the last shown result available as _."""
        builtins._ = value
