# dotrepl.repl - REPL interface module
from dotrepl.repl.accumulator import BlockState, LineAccumulator
from dotrepl.repl.repl import Repl, SessionControl

__all__ = [
    "Repl",
    "SessionControl",
    "LineAccumulator",
    "BlockState",
]
