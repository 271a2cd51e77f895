"""Escaping helpers for DOT identifiers and label text."""

import re

_SAFE_ID = re.compile(r"[A-Za-z0-9_]+")

# Digits followed by letters lex as a numeral and a separate identifier.
_NUMERAL = re.compile(r"[0-9]+")

# Bare keywords are not valid identifiers; the grammar matches them case-insensitively.
_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})

_LABEL_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_ESC_STRING_ESCAPES = {
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(char: str, escapes: dict[str, str]) -> str:
    if char in escapes:
        return escapes[char]
    code = ord(char)
    if code < 0x20 or code == 0x7F:
        # Graphviz decodes numeric character references in quoted strings.
        return f"&#{code};"
    return char


def is_safe_id(text: str) -> bool:
    """Check whether text can be emitted as an identifier without quotes."""
    if not _SAFE_ID.fullmatch(text) or text.lower() in _KEYWORDS:
        return False
    return not text[0].isdigit() or bool(_NUMERAL.fullmatch(text))


def escape_label(text: str) -> str:
    """Escape text for use inside a double-quoted string, without the quotes.

    Backslashes are escaped too, so the renderer draws them literally.
    Control characters other than line breaks and tabs become numeric
    character references.
    """
    return "".join(_escape_char(char, _LABEL_ESCAPES) for char in text)


def escape_esc_string(text: str) -> str:
    """Escape a Graphviz escString, leaving backslash sequences alone."""
    return "".join(_escape_char(char, _ESC_STRING_ESCAPES) for char in text)


def escape_id(text: str) -> str:
    """Return text as a syntactically valid DOT identifier.

    Identifiers made only of ASCII letters, digits and underscores are
    returned unchanged, unless they start with a digit without being a plain
    numeral. Everything else, including the empty string and the DOT
    keywords, is double quoted with quotes, backslashes and control
    characters escaped.

    Args:
        text: Raw identifier text

    Returns:
        Identifier ready to be written to a DOT document
    """
    if is_safe_id(text):
        return text
    return f'"{escape_label(text)}"'


def escape_html(text: str) -> str:
    """Escape tags so text is safe inside a Graphviz HTML label."""
    return (
        text.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\n", '<br align="left"/>')
    )
