"""Tests for identifier and label escaping."""

import pytest

from graphdot.escape import escape_esc_string, escape_html, escape_id, escape_label, is_safe_id


def unquote(text: str) -> str:
    """Read back a quoted DOT identifier the way a DOT lexer would."""
    assert text.startswith('"') and text.endswith('"')
    body = text[1:-1]
    result = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\":
            nxt = body[i + 1]
            result.append({"n": "\n", "r": "\r"}.get(nxt, nxt))
            i += 2
        else:
            result.append(char)
            i += 1
    return "".join(result)


class TestEscapeId:
    """Identifier escaping."""

    @pytest.mark.parametrize("text", ["A", "hello", "snake_case", "N0", "_private", "123"])
    def test_safe_identifiers_are_unchanged(self, text):
        assert escape_id(text) == text

    def test_quote_is_escaped(self):
        assert escape_id('say "hi"') == '"say \\"hi\\""'

    def test_newline_is_escaped(self):
        assert escape_id("line1\nline2") == '"line1\\nline2"'

    def test_backslash_is_escaped(self):
        assert escape_id("C:\\temp") == '"C:\\\\temp"'

    def test_spaces_and_punctuation_are_quoted(self):
        assert escape_id("Weird { struct : ure } !!!") == '"Weird { struct : ure } !!!"'
        assert escape_id("a-b") == '"a-b"'

    def test_empty_text(self):
        assert escape_id("") == '""'

    @pytest.mark.parametrize("keyword", ["node", "edge", "graph", "digraph", "subgraph", "strict", "Graph"])
    def test_keywords_are_quoted(self, keyword):
        assert escape_id(keyword) == f'"{keyword}"'

    def test_idempotent_on_safe_identifiers(self):
        assert escape_id(escape_id("abc_123")) == "abc_123"

    @pytest.mark.parametrize("text", ['say "hi"', "two\nlines", "back\\slash", 'mix "\\\n"', "", "crlf\r\n"])
    def test_round_trip(self, text):
        assert unquote(escape_id(text)) == text

    def test_is_safe_id(self):
        assert is_safe_id("abc")
        assert not is_safe_id("a b")
        assert not is_safe_id("")
        assert not is_safe_id("node")

    @pytest.mark.parametrize("text", ["1abc", "0x1F", "2_b"])
    def test_leading_digit_identifiers_are_quoted(self, text):
        """Digits followed by letters would lex as a numeral plus a second identifier."""
        assert escape_id(text) == f'"{text}"'
        assert not is_safe_id(text)

    def test_control_characters_are_escaped(self):
        assert escape_id("a\tb\x00c") == '"a\\tb&#0;c"'


class TestEscapeLabels:
    """Label and HTML escaping."""

    def test_escape_label_escapes_backslashes(self):
        assert escape_label("a\\lb") == "a\\\\lb"

    def test_escape_esc_string_keeps_backslash_sequences(self):
        assert escape_esc_string("left\\lright\\r") == "left\\lright\\r"
        assert escape_esc_string('quote "x"') == 'quote \\"x\\"'

    def test_escape_html(self):
        assert escape_html('<b>"A" & B</b>') == "&lt;b&gt;&quot;A&quot; &amp; B&lt;/b&gt;"
        assert escape_html("one\ntwo") == 'one<br align="left"/>two'

    def test_escape_label_control_characters(self):
        assert escape_label("tab\there") == "tab\\there"
        assert escape_label("bell\x07") == "bell&#7;"
        assert escape_label("del\x7f") == "del&#127;"
        assert escape_label("unit\x1fsep") == "unit&#31;sep"

    def test_escape_esc_string_control_characters(self):
        assert escape_esc_string("a\tb\\l") == "a\\tb\\l"
        assert escape_esc_string("\x00\\r") == "&#0;\\r"
