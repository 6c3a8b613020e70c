# dotrepl.scanner.tokens - Token definitions
"""
Token kinds and span records produced by the scanner.

Tokens never copy text out of the source; they carry a start offset and a
length into the string they were scanned from.
"""
from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Kinds of token the scanner emits."""

    # Terminators
    EOF = auto()
    ERROR = auto()

    IDENTIFIER = auto()

    # Keywords
    AND = auto()
    AS = auto()
    ASSERT = auto()
    ASYNC = auto()
    AWAIT = auto()
    BREAK = auto()
    CLASS = auto()
    CONTINUE = auto()
    DEF = auto()
    DEL = auto()
    ELIF = auto()
    ELSE = auto()
    EXCEPT = auto()
    FALSE = auto()
    FINALLY = auto()
    FOR = auto()
    FROM = auto()
    GLOBAL = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    IS = auto()
    LAMBDA = auto()
    NONE = auto()
    NONLOCAL = auto()
    NOT = auto()
    OR = auto()
    PASS = auto()
    RAISE = auto()
    RETURN = auto()
    TRUE = auto()
    TRY = auto()
    WHILE = auto()
    WITH = auto()
    YIELD = auto()

    # Literals
    NUMBER = auto()
    STRING = auto()

    # Punctuation
    DOT = auto()
    COMMA = auto()
    COLON = auto()
    SEMICOLON = auto()
    AT = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_SQUARE = auto()
    RIGHT_SQUARE = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    BACKSLASH = auto()
    NEWLINE = auto()

    # Any other operator (+, **=, ->, ...)
    OPERATOR = auto()

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_KINDS

    @property
    def is_identifier_like(self) -> bool:
        """True for identifiers and keywords; either may end a completable chain."""
        return self is TokenKind.IDENTIFIER or self in _KEYWORD_KINDS


KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "as": TokenKind.AS,
    "assert": TokenKind.ASSERT,
    "async": TokenKind.ASYNC,
    "await": TokenKind.AWAIT,
    "break": TokenKind.BREAK,
    "class": TokenKind.CLASS,
    "continue": TokenKind.CONTINUE,
    "def": TokenKind.DEF,
    "del": TokenKind.DEL,
    "elif": TokenKind.ELIF,
    "else": TokenKind.ELSE,
    "except": TokenKind.EXCEPT,
    "False": TokenKind.FALSE,
    "finally": TokenKind.FINALLY,
    "for": TokenKind.FOR,
    "from": TokenKind.FROM,
    "global": TokenKind.GLOBAL,
    "if": TokenKind.IF,
    "import": TokenKind.IMPORT,
    "in": TokenKind.IN,
    "is": TokenKind.IS,
    "lambda": TokenKind.LAMBDA,
    "None": TokenKind.NONE,
    "nonlocal": TokenKind.NONLOCAL,
    "not": TokenKind.NOT,
    "or": TokenKind.OR,
    "pass": TokenKind.PASS,
    "raise": TokenKind.RAISE,
    "return": TokenKind.RETURN,
    "True": TokenKind.TRUE,
    "try": TokenKind.TRY,
    "while": TokenKind.WHILE,
    "with": TokenKind.WITH,
    "yield": TokenKind.YIELD,
}

_KEYWORD_KINDS = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "@": TokenKind.AT,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "[": TokenKind.LEFT_SQUARE,
    "]": TokenKind.RIGHT_SQUARE,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "\\": TokenKind.BACKSLASH,
    "\n": TokenKind.NEWLINE,
}

OPERATOR_CHARS = frozenset("+-*/%&|^~<>=!")


@dataclass(frozen=True)
class Token:
    """A typed span over the scanned source."""

    kind: TokenKind
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def text(self, source: str) -> str:
        """Slice this token's text out of the source it came from."""
        return source[self.start:self.end]

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.start}, {self.length})"
