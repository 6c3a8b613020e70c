# dotrepl.repl.highlight - Input line highlighting
"""
Colors the line being edited using the completion scanner's tokens.
"""
from typing import Callable

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer

from dotrepl.scanner import Scanner, TokenKind

_KIND_STYLES = {
    TokenKind.STRING: "class:string",
    TokenKind.NUMBER: "class:number",
    TokenKind.AT: "class:decorator",
}


def _token_style(kind: TokenKind) -> str:
    if kind.is_keyword:
        return "class:keyword"
    return _KIND_STYLES.get(kind, "")


def _gap(text: str) -> StyleAndTextTuples:
    # Text between tokens is whitespace, possibly ending in a comment
    hash_at = text.find("#")
    if hash_at < 0:
        return [("", text)] if text else []
    fragments: StyleAndTextTuples = []
    if hash_at:
        fragments.append(("", text[:hash_at]))
    fragments.append(("class:comment", text[hash_at:]))
    return fragments


def highlight_line(line: str) -> StyleAndTextTuples:
    """
    Split one line into styled fragments.

    Scanning stops at the first ERROR token; the rest of the line is left
    unstyled.
    """
    fragments: StyleAndTextTuples = []
    position = 0
    for token in Scanner(line).tokenize():
        fragments.extend(_gap(line[position:token.start]))
        if token.kind in (TokenKind.EOF, TokenKind.ERROR):
            if token.start < len(line):
                fragments.append(("", line[token.start:]))
            break
        fragments.append((_token_style(token.kind), token.text(line)))
        position = token.end
    return fragments


class ScannerLexer(Lexer):
    """prompt_toolkit lexer backed by dotrepl's scanner."""

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        lines = document.lines

        def get_line(lineno: int) -> StyleAndTextTuples:
            if lineno >= len(lines):
                return []
            return highlight_line(lines[lineno])

        return get_line
