# tests/test_highlight.py - Input highlighting tests
"""
Tests for the scanner-backed prompt_toolkit lexer.
"""
from prompt_toolkit.document import Document

from dotrepl.repl.highlight import ScannerLexer, highlight_line


def joined(fragments):
    return "".join(text for _, text in fragments)


class TestHighlight:
    """Tests for highlight_line and ScannerLexer."""

    def test_text_preserved(self):
        """Test fragments always rebuild the original line."""
        for line in ["x = 1", "  for i in range(3):  # loop", 'print("a.b")', "a $ b", ""]:
            assert joined(highlight_line(line)) == line

    def test_styles(self):
        fragments = highlight_line("if x: return 'y' # done")

        assert ("class:keyword", "if") in fragments
        assert ("class:keyword", "return") in fragments
        assert ("class:string", "'y'") in fragments
        assert ("class:comment", "# done") in fragments
        assert ("", "x") in fragments

    def test_error_leaves_rest_plain(self):
        fragments = highlight_line('x = "open')
        assert fragments[-1] == ("", '"open')

    def test_lexer_lines(self):
        """Test the lexer serves each document line."""
        get_line = ScannerLexer().lex_document(Document("@dec\ndef f(): pass"))

        assert get_line(0)[0] == ("class:decorator", "@")
        assert get_line(1)[0] == ("class:keyword", "def")
        assert get_line(5) == []
