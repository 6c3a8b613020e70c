# dotrepl.scanner.scanner - Source tokenizer
"""
Tokenizer used by tab completion.

The scanner works on partial, possibly malformed input. It never raises:
anything it cannot make sense of becomes a single ERROR token and scanning
stops there.
"""
from typing import Iterator, Optional

from dotrepl.scanner.tokens import (
    KEYWORDS,
    OPERATOR_CHARS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
)

# Letters that may prefix a string literal (r"", b'', f"", rb"", ...)
STRING_PREFIXES = frozenset(
    {"r", "u", "b", "f", "br", "rb", "fr", "rf"}
)


class Scanner:
    """
    Restartable tokenizer over a source string.

    Usage:
        tokens = Scanner("os.path.jo").tokenize()
        # or pull one at a time:
        scanner = Scanner(source)
        token = scanner.scan_token()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self._done = False

    @property
    def _current_char(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    @property
    def _peek_char(self) -> Optional[str]:
        if self.pos + 1 >= len(self.source):
            return None
        return self.source[self.pos + 1]

    def _make(self, kind: TokenKind, start: int) -> Token:
        return Token(kind, start, self.pos - start)

    def _skip_whitespace_and_comments(self) -> None:
        while self._current_char is not None:
            if self._current_char in " \t\r\f":
                self.pos += 1
            elif self._current_char == "#":
                while self._current_char is not None and self._current_char != "\n":
                    self.pos += 1
            else:
                break

    def scan_token(self) -> Token:
        """
        Scan the next token.

        Once EOF or ERROR has been produced, every further call returns EOF
        at the end of the source.
        """
        if self._done:
            return Token(TokenKind.EOF, len(self.source), 0)

        self._skip_whitespace_and_comments()
        start = self.pos
        char = self._current_char

        if char is None:
            self._done = True
            return self._make(TokenKind.EOF, start)

        if _is_identifier_start(char):
            return self._read_identifier_or_keyword()

        if char.isdigit():
            return self._read_number()

        if char in "'\"":
            return self._read_string(start)

        if char in SINGLE_CHAR_TOKENS:
            self.pos += 1
            return self._make(SINGLE_CHAR_TOKENS[char], start)

        if char in OPERATOR_CHARS:
            while self._current_char is not None and self._current_char in OPERATOR_CHARS:
                self.pos += 1
            return self._make(TokenKind.OPERATOR, start)

        self.pos += 1
        return self._error(start)

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in order; the last one is always EOF or ERROR.
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.scan_token()
            yield token
            if token.kind in (TokenKind.EOF, TokenKind.ERROR):
                return

    def _error(self, start: int) -> Token:
        self._done = True
        return self._make(TokenKind.ERROR, start)

    def _read_identifier_or_keyword(self) -> Token:
        start = self.pos
        while self._current_char is not None and _is_identifier_char(self._current_char):
            self.pos += 1

        text = self.source[start:self.pos]
        if self._current_char in ("'", '"') and text.lower() in STRING_PREFIXES:
            return self._read_string(start)

        return self._make(KEYWORDS.get(text, TokenKind.IDENTIFIER), start)

    def _read_number(self) -> Token:
        """
        Read a numeric literal.

        Digits, underscores, radix and exponent letters are consumed
        together; a dot followed by digits continues the literal, so a
        trailing "1." stays one NUMBER and never ends a chain.
        """
        start = self.pos
        while self._current_char is not None and (
            self._current_char.isalnum() or self._current_char == "_"
        ):
            self.pos += 1

        if self._current_char == ".":
            self.pos += 1
            while self._current_char is not None and (
                self._current_char.isalnum() or self._current_char == "_"
            ):
                self.pos += 1

        # Exponent sign: 1e-5
        if (
            self._current_char in ("+", "-")
            and self.source[self.pos - 1] in "eE"
            and self._peek_char is not None
            and self._peek_char.isdigit()
        ):
            self.pos += 1
            while self._current_char is not None and self._current_char.isdigit():
                self.pos += 1

        return self._make(TokenKind.NUMBER, start)

    def _read_string(self, start: int) -> Token:
        """Read a quoted string starting at the current quote character."""
        quote = self._current_char
        triple = self.source.startswith(quote * 3, self.pos)
        delimiter = quote * 3 if triple else quote
        self.pos += len(delimiter)

        while True:
            char = self._current_char
            if char is None:
                return self._error(start)
            if char == "\n" and not triple:
                return self._error(start)
            if char == "\\":
                self.pos += 2
                continue
            if self.source.startswith(delimiter, self.pos):
                self.pos += len(delimiter)
                return self._make(TokenKind.STRING, start)
            self.pos += 1


def _is_identifier_start(char: str) -> bool:
    return char == "_" or char.isidentifier()


def _is_identifier_char(char: str) -> bool:
    return ("a" + char).isidentifier()


def tokenize(source: str) -> list[Token]:
    """Tokenize source text; the result ends with EOF or ERROR."""
    return Scanner(source).tokenize()
