# dotrepl.completion.engine - Tab completion pipeline
"""
Runs one completion request: extract the chain, resolve it, collect
candidates and decide how to render them.
"""
import logging
import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from dotrepl.completion.chain import extract
from dotrepl.completion.collector import CandidateEntry, collect
from dotrepl.completion.renderer import CompletionView, RenderAction, RenderKind, apply, render
from dotrepl.completion.resolver import resolve
from dotrepl.errors import CompletionError
from dotrepl.runtime.values import SyntheticScope, ValueModel
from dotrepl.scanner import KEYWORDS

logger = logging.getLogger(__name__)


class CompletionEngine:
    """
    Context-aware completion over a live module.

    Usage:
        engine = CompletionEngine(interp.module, interp.builtins, PythonValueModel())
        action = engine.complete("os.pa", 5)
    """

    def __init__(
        self,
        module: Any,
        builtins_scope: Any,
        model: ValueModel,
        keywords: Optional[Iterable[str]] = None,
        module_names: Optional[Callable[[], Iterable[str]]] = None,
        diagnostics: Optional[TextIO] = None,
    ):
        """
        Initialize engine.

        Args:
            module: Global scope completion starts from
            builtins_scope: Builtin namespace used as fallback
            model: Value model for lookups and listings
            keywords: Language keywords offered last (defaults to the
                scanner's keyword table)
            module_names: Provider of loaded module names for import lines
            diagnostics: Stream for internal error reports (default stderr)
        """
        self.module = module
        self.builtins_scope = builtins_scope
        self.model = model
        self.keywords = list(KEYWORDS) if keywords is None else list(keywords)
        self.module_names = module_names
        self.diagnostics = diagnostics

    def candidates(self, buffer: str, cursor: int) -> tuple[list[CandidateEntry], str]:
        """
        Collect candidates for the text before the cursor.

        Returns:
            Tuple of (candidates, prefix). Nothing to complete gives an
            empty list.

        Raises:
            CompletionError: On an internal invariant violation
        """
        chain = extract(buffer, cursor)
        if chain is None:
            return [], ""

        logger.debug("completing %r after %r", chain.prefix, chain.names)

        names = self.module_names() if self.module_names else None
        resolution = resolve(chain, self.module, self.builtins_scope, self.model, names)
        if resolution is None:
            return [], chain.prefix

        # Built per call, dropped on return
        keyword_scope = SyntheticScope("keywords", self.keywords)
        scope_chain = (self.module, self.builtins_scope, keyword_scope)

        escalate = resolution.is_global and chain.prefix_length > 0
        found = collect(resolution.root, chain.prefix, escalate, self.model, scope_chain)
        logger.debug("%d candidate(s) for %r", len(found), chain.prefix)
        return found, chain.prefix

    def complete(self, buffer: str, cursor: int) -> RenderAction:
        """
        Work out what a Tab press at cursor should do.

        Internal errors are reported on the diagnostic stream and yield an
        empty action; they never propagate into the line editor.
        """
        try:
            found, prefix = self.candidates(buffer, cursor)
        except CompletionError as e:
            stream = self.diagnostics or sys.stderr
            print("\nInternal error while tab completing.", file=stream)
            logger.debug("completion aborted: %s", e)
            return RenderAction(RenderKind.EMPTY)

        return render([entry.name for entry in found], prefix)

    def handle_tab(self, buffer: str, cursor: int, view: CompletionView) -> RenderAction:
        """Complete and apply the result to the line editor."""
        action = self.complete(buffer, cursor)
        apply(action, view)
        return action
