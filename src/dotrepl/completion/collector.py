# dotrepl.completion.collector - Candidate collection
"""
Collects member names matching a prefix, escalating from the global scope
to builtins and then to keywords.
"""
from dataclasses import dataclass
from typing import Any, Sequence

from dotrepl.errors import CompletionError
from dotrepl.runtime.values import ValueModel

# Collection stops silently once this many candidates are found
MAX_CANDIDATES = 255

CALL_MARKER = "("


@dataclass(frozen=True)
class CandidateEntry:
    """A completion candidate. Callable names carry a trailing "("."""

    name: str
    is_callable: bool = False


def _stages(root: Any, scope_chain: Sequence[Any], escalate: bool) -> list[Any]:
    """Scopes to scan in order: the root, then its successors in the chain."""
    if not escalate:
        return [root]
    for index, scope in enumerate(scope_chain):
        if scope is root:
            return [root, *scope_chain[index + 1:]]
    return [root]


def collect(
    root: Any,
    prefix: str,
    escalate: bool,
    model: ValueModel,
    scope_chain: Sequence[Any] = (),
) -> list[CandidateEntry]:
    """
    Collect candidates that start with prefix.

    Args:
        root: Resolved scope to enumerate first
        prefix: Partially typed name (may be empty)
        escalate: Continue down scope_chain after root
        model: Value model for listing members and checking callability
        scope_chain: Fixed escalation order (module, builtins, keywords)

    Returns:
        Candidates in discovery order, unique by stored name, at most
        MAX_CANDIDATES of them

    Raises:
        CompletionError: If a scope's member listing is not a list of names
    """
    found: list[CandidateEntry] = []
    seen: set[str] = set()

    for scope in _stages(root, scope_chain, escalate):
        members = model.list_members(scope)
        if not isinstance(members, list):
            raise CompletionError(
                f"member listing for {scope!r} returned {type(members).__name__}"
            )

        for member in members:
            if not isinstance(member, str):
                raise CompletionError(
                    f"member listing for {scope!r} contains {type(member).__name__}"
                )
            is_callable = model.is_callable_kind(model.get_attribute(scope, member))
            name = member + CALL_MARKER if is_callable else member

            if len(name) < len(prefix) or name in seen:
                continue
            if not name.startswith(prefix):
                continue

            seen.add(name)
            found.append(CandidateEntry(name=name, is_callable=is_callable))
            if len(found) == MAX_CANDIDATES:
                return found

    return found
