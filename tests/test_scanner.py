# tests/test_scanner.py - Scanner tests
"""
Tests for the tokenizer.
"""
from dotrepl.scanner import Scanner, TokenKind, tokenize


def kinds(source):
    return [token.kind for token in tokenize(source)]


class TestScanner:
    """Tests for the Scanner class."""

    def test_dotted_chain(self):
        """Test identifiers separated by dots."""
        assert kinds("os.path.jo") == [
            TokenKind.IDENTIFIER,
            TokenKind.DOT,
            TokenKind.IDENTIFIER,
            TokenKind.DOT,
            TokenKind.IDENTIFIER,
            TokenKind.EOF,
        ]

    def test_token_spans(self):
        """Test tokens carry offsets into the source."""
        source = "  foo . bar"
        tokens = tokenize(source)

        assert [t.text(source) for t in tokens[:-1]] == ["foo", ".", "bar"]
        assert tokens[0].start == 2
        assert tokens[0].length == 3
        assert tokens[-1].start == len(source)

    def test_keywords(self):
        """Test keywords get their own kinds."""
        assert kinds("from os import path") == [
            TokenKind.FROM,
            TokenKind.IDENTIFIER,
            TokenKind.IMPORT,
            TokenKind.IDENTIFIER,
            TokenKind.EOF,
        ]
        assert TokenKind.IMPORT.is_identifier_like
        assert TokenKind.NONE.is_keyword
        assert not TokenKind.DOT.is_identifier_like

    def test_empty_source(self):
        """Test empty source scans to a lone EOF."""
        assert kinds("") == [TokenKind.EOF]
        assert kinds("   # only a comment") == [TokenKind.EOF]

    def test_strings(self):
        """Test quoted strings, prefixes and triple quotes."""
        assert kinds("'a.b'") == [TokenKind.STRING, TokenKind.EOF]
        assert kinds('f"x{y}"') == [TokenKind.STRING, TokenKind.EOF]
        assert kinds('"""one\ntwo"""') == [TokenKind.STRING, TokenKind.EOF]
        assert kinds(r"'it\'s'") == [TokenKind.STRING, TokenKind.EOF]

    def test_unterminated_string_is_error(self):
        """Test an open string ends the stream with ERROR."""
        assert kinds('x = "abc') == [
            TokenKind.IDENTIFIER,
            TokenKind.OPERATOR,
            TokenKind.ERROR,
        ]

    def test_numbers_swallow_dots(self):
        """Test a number keeps its decimal point."""
        assert kinds("1.") == [TokenKind.NUMBER, TokenKind.EOF]
        assert kinds("1.5e-3") == [TokenKind.NUMBER, TokenKind.EOF]
        assert kinds("0x1F") == [TokenKind.NUMBER, TokenKind.EOF]

    def test_punctuation_and_operators(self):
        """Test brackets, decorator marker and operator runs."""
        assert kinds("@f(a, b) ** 2") == [
            TokenKind.AT,
            TokenKind.IDENTIFIER,
            TokenKind.LEFT_PAREN,
            TokenKind.IDENTIFIER,
            TokenKind.COMMA,
            TokenKind.IDENTIFIER,
            TokenKind.RIGHT_PAREN,
            TokenKind.OPERATOR,
            TokenKind.NUMBER,
            TokenKind.EOF,
        ]

    def test_unknown_character_is_error(self):
        """Test a stray character produces ERROR and stops."""
        assert kinds("a $ b") == [TokenKind.IDENTIFIER, TokenKind.ERROR]

    def test_restartable(self):
        """Test repeated scans agree and EOF is sticky."""
        assert tokenize("a.b") == tokenize("a.b")

        scanner = Scanner("a")
        assert scanner.scan_token().kind is TokenKind.IDENTIFIER
        assert scanner.scan_token().kind is TokenKind.EOF
        assert scanner.scan_token().kind is TokenKind.EOF

    def test_unicode_identifier(self):
        """Test non-ASCII identifiers."""
        source = "données.x"
        tokens = tokenize(source)
        assert tokens[0].kind is TokenKind.IDENTIFIER
        assert tokens[0].text(source) == "données"
