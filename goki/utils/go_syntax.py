"""Go lexical helpers: identifier validation and string-literal quoting."""

import unicodedata

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue",
    "default", "defer", "else", "fallthrough", "for",
    "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return",
    "select", "struct", "switch", "type", "var",
})

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _is_letter(ch: str) -> bool:
    return ch == "_" or unicodedata.category(ch).startswith("L")


def _is_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def is_identifier(name: str) -> bool:
    """
    Report whether name is a legal bare Go identifier.

    A letter or underscore followed by letters, underscores and decimal
    digits (Unicode aware), and not one of the Go keywords.
    """
    if not isinstance(name, str) or not name or name in GO_KEYWORDS:
        return False
    if not _is_letter(name[0]):
        return False
    return all(_is_letter(ch) or _is_digit(ch) for ch in name[1:])


def _escape(ch: str) -> str:
    if ch in ('"', "\\"):
        return "\\" + ch
    if ch.isprintable():
        return ch
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]
    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0xD800 <= code <= 0xDFFF:
        # lone surrogates are not valid runes
        return "\\ufffd"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """Return text as a double-quoted Go string literal (strconv.Quote rules)."""
    return '"' + "".join(_escape(ch) for ch in text) + '"'
