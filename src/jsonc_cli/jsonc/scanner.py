"""JSONC tokenizer.

The scanner walks the document once, left to right, and yields one token per
call to :meth:`Scanner.scan`. Trivia (whitespace, line breaks, comments) is
reported as tokens too unless ``ignore_trivia`` is set, so the formatter can
see every byte of the input and the parser can skip what it does not need.

Token offsets are indexes into the Python string, which is what every edit
produced by this package is expressed in.
"""

from enum import IntEnum

WHITESPACE = frozenset(
    " \t\v\f\u00a0\u1680\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200C))
)
LINE_BREAKS = frozenset("\r\n")
# Characters that end a run of unknown content (e.g. a bare word).
_DELIMITERS = frozenset('{}[]":,/')
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class SyntaxKind(IntEnum):
    """Token kinds produced by the scanner."""

    OPEN_BRACE = 1
    CLOSE_BRACE = 2
    OPEN_BRACKET = 3
    CLOSE_BRACKET = 4
    COMMA = 5
    COLON = 6
    NULL_KEYWORD = 7
    TRUE_KEYWORD = 8
    FALSE_KEYWORD = 9
    STRING_LITERAL = 10
    NUMERIC_LITERAL = 11
    LINE_COMMENT = 12
    BLOCK_COMMENT = 13
    LINE_BREAK = 14
    TRIVIA = 15
    UNKNOWN = 16
    EOF = 17


class ScanError(IntEnum):
    """Problems found while scanning the current token."""

    NONE = 0
    UNEXPECTED_END_OF_COMMENT = 1
    UNEXPECTED_END_OF_STRING = 2
    UNEXPECTED_END_OF_NUMBER = 3
    INVALID_UNICODE = 4
    INVALID_ESCAPE_CHARACTER = 5
    INVALID_CHARACTER = 6


_PUNCTUATION = {
    "{": SyntaxKind.OPEN_BRACE,
    "}": SyntaxKind.CLOSE_BRACE,
    "[": SyntaxKind.OPEN_BRACKET,
    "]": SyntaxKind.CLOSE_BRACKET,
    ":": SyntaxKind.COLON,
    ",": SyntaxKind.COMMA,
}

_KEYWORDS = {
    "true": SyntaxKind.TRUE_KEYWORD,
    "false": SyntaxKind.FALSE_KEYWORD,
    "null": SyntaxKind.NULL_KEYWORD,
}


class Scanner:
    """Stateful tokenizer over a JSONC string.

    After each :meth:`scan` the attributes describe the current token:

    - ``token``: the :class:`SyntaxKind`
    - ``token_offset`` / ``token_length``: its span in the text
    - ``value``: decoded value for strings, raw text for everything else
    - ``scan_error``: the :class:`ScanError` hit while scanning it
    - ``token_start_line`` / ``token_start_character``: zero-based position
    """

    def __init__(self, text: str, ignore_trivia: bool = False):
        self.text = text
        self.ignore_trivia = ignore_trivia
        self.length = len(text)
        self.pos = 0
        self.value = ""
        self.token_offset = 0
        self.token = SyntaxKind.UNKNOWN
        self.line_number = 0
        self.token_line_start_offset = 0
        self.token_line = 0
        self.prev_token_line_start_offset = 0
        self.scan_error = ScanError.NONE

    @property
    def token_length(self) -> int:
        return self.pos - self.token_offset

    @property
    def token_start_line(self) -> int:
        return self.token_line

    @property
    def token_start_character(self) -> int:
        return self.token_offset - self.prev_token_line_start_offset

    def scan(self) -> SyntaxKind:
        """Advance to the next token and return its kind."""
        while True:
            token = self._scan_next()
            if not (
                self.ignore_trivia
                and SyntaxKind.LINE_COMMENT <= token <= SyntaxKind.TRIVIA
            ):
                return token

    def _scan_next(self) -> SyntaxKind:
        text = self.text
        self.value = ""
        self.scan_error = ScanError.NONE
        self.token_offset = self.pos
        self.token_line = self.line_number
        self.prev_token_line_start_offset = self.token_line_start_offset

        if self.pos >= self.length:
            self.token_offset = self.length
            self.token = SyntaxKind.EOF
            return self.token

        ch = text[self.pos]

        if ch in WHITESPACE:
            while self.pos < self.length and text[self.pos] in WHITESPACE:
                self.pos += 1
            self.value = text[self.token_offset : self.pos]
            self.token = SyntaxKind.TRIVIA
            return self.token

        if ch in LINE_BREAKS:
            self.pos += 1
            if ch == "\r" and self.pos < self.length and text[self.pos] == "\n":
                self.pos += 1
            self.value = text[self.token_offset : self.pos]
            self.line_number += 1
            self.token_line_start_offset = self.pos
            self.token = SyntaxKind.LINE_BREAK
            return self.token

        if ch in _PUNCTUATION:
            self.pos += 1
            self.value = ch
            self.token = _PUNCTUATION[ch]
            return self.token

        if ch == '"':
            self.pos += 1
            self.value = self._scan_string()
            self.token = SyntaxKind.STRING_LITERAL
            return self.token

        if ch == "/":
            return self._scan_slash()

        if ch == "-":
            self.value = ch
            self.pos += 1
            if self.pos == self.length or text[self.pos] not in _DIGITS:
                self.token = SyntaxKind.UNKNOWN
                return self.token
            self.value += self._scan_number()
            self.token = SyntaxKind.NUMERIC_LITERAL
            return self.token

        if ch in _DIGITS:
            self.value = self._scan_number()
            self.token = SyntaxKind.NUMERIC_LITERAL
            return self.token

        while self.pos < self.length and _is_unknown_content(text[self.pos]):
            self.pos += 1
        if self.token_offset != self.pos:
            self.value = text[self.token_offset : self.pos]
            self.token = _KEYWORDS.get(self.value, SyntaxKind.UNKNOWN)
            return self.token

        self.value = ch
        self.pos += 1
        self.token = SyntaxKind.UNKNOWN
        return self.token

    def _scan_slash(self) -> SyntaxKind:
        text = self.text
        start = self.pos
        nxt = text[self.pos + 1] if self.pos + 1 < self.length else ""

        if nxt == "/":
            self.pos += 2
            while self.pos < self.length and text[self.pos] not in LINE_BREAKS:
                self.pos += 1
            self.value = text[start : self.pos]
            self.token = SyntaxKind.LINE_COMMENT
            return self.token

        if nxt == "*":
            self.pos += 2
            safe_length = self.length - 1
            closed = False
            while self.pos < safe_length:
                ch = text[self.pos]
                if ch == "*" and text[self.pos + 1] == "/":
                    self.pos += 2
                    closed = True
                    break
                self.pos += 1
                if ch in LINE_BREAKS:
                    if ch == "\r" and self.pos < self.length and text[self.pos] == "\n":
                        self.pos += 1
                    self.line_number += 1
                    self.token_line_start_offset = self.pos
            if not closed:
                self.pos = self.length
                self.scan_error = ScanError.UNEXPECTED_END_OF_COMMENT
            self.value = text[start : self.pos]
            self.token = SyntaxKind.BLOCK_COMMENT
            return self.token

        self.value = "/"
        self.pos += 1
        self.token = SyntaxKind.UNKNOWN
        return self.token

    def _scan_number(self) -> str:
        text = self.text
        start = self.pos
        if text[self.pos] == "0":
            self.pos += 1
        else:
            self.pos += 1
            while self.pos < self.length and text[self.pos] in _DIGITS:
                self.pos += 1
        if self.pos < self.length and text[self.pos] == ".":
            self.pos += 1
            if self.pos < self.length and text[self.pos] in _DIGITS:
                self.pos += 1
                while self.pos < self.length and text[self.pos] in _DIGITS:
                    self.pos += 1
            else:
                self.scan_error = ScanError.UNEXPECTED_END_OF_NUMBER
                return text[start : self.pos]
        end = self.pos
        if self.pos < self.length and text[self.pos] in "Ee":
            self.pos += 1
            if self.pos < self.length and text[self.pos] in "+-":
                self.pos += 1
            if self.pos < self.length and text[self.pos] in _DIGITS:
                self.pos += 1
                while self.pos < self.length and text[self.pos] in _DIGITS:
                    self.pos += 1
                end = self.pos
            else:
                self.scan_error = ScanError.UNEXPECTED_END_OF_NUMBER
        return text[start:end]

    def _scan_string(self) -> str:
        text = self.text
        parts = []
        start = self.pos
        while True:
            if self.pos >= self.length:
                parts.append(text[start : self.pos])
                self.scan_error = ScanError.UNEXPECTED_END_OF_STRING
                break
            ch = text[self.pos]
            if ch == '"':
                parts.append(text[start : self.pos])
                self.pos += 1
                break
            if ch == "\\":
                parts.append(text[start : self.pos])
                self.pos += 1
                if self.pos >= self.length:
                    self.scan_error = ScanError.UNEXPECTED_END_OF_STRING
                    break
                esc = text[self.pos]
                self.pos += 1
                if esc in _ESCAPES:
                    parts.append(_ESCAPES[esc])
                elif esc == "u":
                    code = self._scan_hex_digits(4)
                    if 0xD800 <= code <= 0xDBFF:
                        low = self._scan_low_surrogate()
                        if low >= 0:
                            code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                    if code >= 0:
                        parts.append(chr(code))
                    else:
                        self.scan_error = ScanError.INVALID_UNICODE
                else:
                    self.scan_error = ScanError.INVALID_ESCAPE_CHARACTER
                start = self.pos
                continue
            if "\x00" <= ch <= "\x1f":
                if ch in LINE_BREAKS:
                    parts.append(text[start : self.pos])
                    self.scan_error = ScanError.UNEXPECTED_END_OF_STRING
                    break
                self.scan_error = ScanError.INVALID_CHARACTER
            self.pos += 1
        return "".join(parts)

    def _scan_hex_digits(self, count: int) -> int:
        digits = self.text[self.pos : self.pos + count]
        if len(digits) < count or not all(c in _HEX_DIGITS for c in digits):
            # Consume the well-formed prefix so scanning resumes after it.
            for c in digits:
                if c not in _HEX_DIGITS:
                    break
                self.pos += 1
            return -1
        self.pos += count
        return int(digits, 16)

    def _scan_low_surrogate(self) -> int:
        """Consume a ``\\uDC00``-``\\uDFFF`` escape if one comes next."""
        if not self.text.startswith("\\u", self.pos):
            return -1
        digits = self.text[self.pos + 2 : self.pos + 6]
        if len(digits) < 4 or not all(c in _HEX_DIGITS for c in digits):
            return -1
        code = int(digits, 16)
        if not 0xDC00 <= code <= 0xDFFF:
            return -1
        self.pos += 6
        return code


def _is_unknown_content(ch: str) -> bool:
    return not (ch in WHITESPACE or ch in LINE_BREAKS or ch in _DELIMITERS)


def create_scanner(text: str, ignore_trivia: bool = False) -> Scanner:
    """Return a :class:`Scanner` positioned at the start of ``text``."""
    return Scanner(text, ignore_trivia)


__all__ = [
    "ScanError",
    "Scanner",
    "SyntaxKind",
    "create_scanner",
]
