# dotrepl.scanner - Tokenizer module
from dotrepl.scanner.scanner import Scanner, tokenize
from dotrepl.scanner.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "Scanner",
    "tokenize",
    "Token",
    "TokenKind",
    "KEYWORDS",
]
