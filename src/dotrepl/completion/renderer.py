# dotrepl.completion.renderer - Turning candidates into edits
"""
Decides what a Tab press does with the collected candidates: insert text,
print a listing, or nothing.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol, Sequence


class RenderKind(Enum):
    EMPTY = auto()
    SINGLE_INSERT = auto()
    COMMON_PREFIX_INSERT = auto()
    LISTING = auto()


@dataclass
class RenderAction:
    """Result of rendering: text to insert or names to list."""

    kind: RenderKind
    text: str = ""
    names: list[str] = field(default_factory=list)


class CompletionView(Protocol):
    """Callbacks into the line editor."""

    @property
    def width(self) -> int:
        ...

    def insert_text(self, text: str) -> None:
        ...

    def reposition_cursor(self) -> None:
        ...

    def show_listing(self, text: str) -> None:
        ...


def common_prefix_end(names: Sequence[str], start: int) -> int:
    """
    Offset where the names stop agreeing, scanning from start.

    The first name is compared against every other one; the scan stops at
    the first difference or at the end of the first name.
    """
    first = names[0]
    end = start
    while end < len(first):
        char = first[end]
        if any(end >= len(other) or other[end] != char for other in names[1:]):
            break
        end += 1
    return end


def render(names: Sequence[str], prefix: str) -> RenderAction:
    """
    Choose the action for a set of candidate names.

    Args:
        names: Candidate names, already prefix-filtered
        prefix: What the user has typed of the final segment

    Returns:
        RenderAction
    """
    if not names:
        return RenderAction(RenderKind.EMPTY)

    if len(names) == 1:
        return RenderAction(RenderKind.SINGLE_INSERT, text=names[0][len(prefix):])

    end = common_prefix_end(names, len(prefix))
    if end > len(prefix):
        return RenderAction(RenderKind.COMMON_PREFIX_INSERT, text=names[0][len(prefix):end])

    return RenderAction(RenderKind.LISTING, names=list(names))


def format_listing(names: Sequence[str], width: int) -> str:
    """
    Lay names out in columns for a terminal of the given width.

    Every entry is padded to the widest name plus two spaces. A newline
    ends each full row and, if needed, the last partial one.
    """
    max_width = max(len(name) for name in names)
    columns = max(1, width // (max_width + 2))

    parts: list[str] = []
    column = 0
    for name in names:
        parts.append(f"{name:<{max_width}}  ")
        column += 1
        if column >= columns:
            parts.append("\n")
            column = 0
    if column:
        parts.append("\n")
    return "".join(parts)


def apply(action: RenderAction, view: CompletionView) -> None:
    """Carry out a render action against the line editor."""
    if action.kind is RenderKind.SINGLE_INSERT:
        view.insert_text(action.text)
        view.reposition_cursor()
    elif action.kind is RenderKind.COMMON_PREFIX_INSERT:
        view.insert_text(action.text)
    elif action.kind is RenderKind.LISTING:
        view.show_listing(format_listing(action.names, view.width))
