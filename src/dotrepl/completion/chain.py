# dotrepl.completion.chain - Completable chain extraction
"""
Finds the dotted identifier chain that ends at the cursor.
"""
from dataclasses import dataclass
from typing import Optional

from dotrepl.scanner import Token, TokenKind, tokenize


@dataclass(frozen=True)
class ChainSpec:
    """
    The completable tail of a line.

    For "os.path.jo" the segments are the tokens for os and path, the
    partial token is jo and the prefix is "jo". For "os.path." there is no
    partial token and the prefix is empty.
    """

    source: str
    segments: tuple[Token, ...]
    partial: Optional[Token]
    anchor_keyword: Optional[TokenKind] = None

    @property
    def is_bare_dot(self) -> bool:
        return self.partial is None

    @property
    def prefix(self) -> str:
        return "" if self.partial is None else self.partial.text(self.source)

    @property
    def prefix_length(self) -> int:
        return 0 if self.partial is None else self.partial.length

    @property
    def names(self) -> list[str]:
        """Text of the segments to resolve, outermost first."""
        return [token.text(self.source) for token in self.segments]

    @property
    def follows_import(self) -> bool:
        return self.anchor_keyword in (TokenKind.IMPORT, TokenKind.FROM)


def extract(buffer: str, cursor: int) -> Optional[ChainSpec]:
    """
    Extract the completable chain ending at the cursor.

    Args:
        buffer: Current line text
        cursor: Cursor offset into the buffer

    Returns:
        ChainSpec, or None when there is nothing to complete
    """
    if cursor == 0:
        return None

    source = buffer[:cursor]
    tokens = tokenize(source)
    if len(tokens) == 1 or tokens[-1].kind is TokenKind.ERROR:
        return None

    last = tokens[-2]
    if last.kind is TokenKind.DOT:
        partial = None
        # The dot itself separates the chain from an empty partial segment
        position = len(tokens) - 1
    elif last.kind.is_identifier_like:
        partial = last
        position = len(tokens) - 2
    else:
        return None

    # Walk back over DOT IDENTIFIER pairs
    start = position
    while start >= 2:
        if tokens[start - 1].kind is not TokenKind.DOT:
            break
        if tokens[start - 2].kind is not TokenKind.IDENTIFIER:
            return None
        start -= 2
    else:
        if start == 1 and tokens[0].kind is TokenKind.DOT:
            return None

    segments = tuple(tokens[start:position:2])
    anchor = tokens[start - 1].kind if start > 0 else None
    return ChainSpec(source=source, segments=segments, partial=partial, anchor_keyword=anchor)
