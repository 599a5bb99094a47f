"""JSONC pretty-printer.

The formatter never rebuilds the document. It scans token by token and, for
each gap between two significant tokens, decides what whitespace belongs
there; wherever the current whitespace differs it emits an :class:`Edit`.
Comments are tokens too, so they survive formatting in place.

If the scanner meets something it cannot tokenize cleanly (an unknown
symbol, an unterminated string) the whitespace in front of it is left
untouched.
"""

from __future__ import annotations

from typing import List, Optional

from ..models import FormattingOptions
from .edits import Edit, Range
from .scanner import ScanError, Scanner, SyntaxKind

_CLOSING = {
    SyntaxKind.CLOSE_BRACE: SyntaxKind.OPEN_BRACE,
    SyntaxKind.CLOSE_BRACKET: SyntaxKind.OPEN_BRACKET,
}
_VALUE_END = (
    SyntaxKind.NULL_KEYWORD,
    SyntaxKind.TRUE_KEYWORD,
    SyntaxKind.FALSE_KEYWORD,
    SyntaxKind.NUMERIC_LITERAL,
    SyntaxKind.STRING_LITERAL,
    SyntaxKind.CLOSE_BRACE,
    SyntaxKind.CLOSE_BRACKET,
)
_COMMENTS = (SyntaxKind.LINE_COMMENT, SyntaxKind.BLOCK_COMMENT)


def is_eol(text: str, offset: int) -> bool:
    return 0 <= offset < len(text) and text[offset] in "\r\n"


def get_eol(options: FormattingOptions, text: str) -> str:
    """Line ending to format with: the document's first one, else ``options.eol``."""
    for i, ch in enumerate(text):
        if ch == "\r":
            if i + 1 < len(text) and text[i + 1] == "\n":
                return "\r\n"
            return "\r"
        if ch == "\n":
            return "\n"
    return options.eol


def compute_indent_level(content: str, options: FormattingOptions) -> int:
    width = 0
    for ch in content:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += options.tab_size
        else:
            break
    return width // options.tab_size


def format(
    text: str, range: Optional[Range], options: FormattingOptions
) -> List[Edit]:
    """Compute the edits that format ``text``.

    Args:
        text: JSONC document
        range: Only edits touching this span are returned; the span is widened
            to whole lines. None formats the whole document.
        options: Indentation and line ending settings

    Returns:
        Non-overlapping edits in document order
    """
    if range is not None:
        range_start = range.offset
        range_end = range_start + range.length
        format_start = range_start
        while format_start > 0 and not is_eol(text, format_start - 1):
            format_start -= 1
        end_offset = range_end
        while end_offset < len(text) and not is_eol(text, end_offset):
            end_offset += 1
        format_text = text[format_start:end_offset]
        initial_indent_level = compute_indent_level(format_text, options)
    else:
        range_start = 0
        range_end = len(text)
        format_start = 0
        format_text = text
        initial_indent_level = 0

    eol = get_eol(options, text)
    indent_value = " " * options.tab_size if options.insert_spaces else "\t"

    scanner = Scanner(format_text, ignore_trivia=False)
    indent_level = 0
    line_break = False
    has_error = False
    edits: List[Edit] = []

    def new_line_and_indent() -> str:
        return eol + indent_value * (initial_indent_level + indent_level)

    def scan_next() -> SyntaxKind:
        nonlocal line_break, has_error
        token = scanner.scan()
        line_break = False
        while token in (SyntaxKind.TRIVIA, SyntaxKind.LINE_BREAK):
            line_break = line_break or token == SyntaxKind.LINE_BREAK
            token = scanner.scan()
        has_error = token == SyntaxKind.UNKNOWN or scanner.scan_error != ScanError.NONE
        return token

    def add_edit(content: str, start: int, end: int) -> None:
        if has_error:
            return
        if range is not None and not (start < range_end and end > range_start):
            return
        if text[start:end] != content:
            edits.append(Edit(offset=start, length=end - start, content=content))

    first_token = scan_next()
    if first_token != SyntaxKind.EOF:
        first_token_start = scanner.token_offset + format_start
        add_edit(indent_value * initial_indent_level, format_start, first_token_start)

    while first_token != SyntaxKind.EOF:
        first_token_end = scanner.token_offset + scanner.token_length + format_start
        second_token = scan_next()
        replace = ""
        needs_line_break = False

        # Comments on the same line stay there, one space away.
        while not line_break and second_token in _COMMENTS:
            comment_start = scanner.token_offset + format_start
            add_edit(" ", first_token_end, comment_start)
            first_token_end = scanner.token_offset + scanner.token_length + format_start
            needs_line_break = second_token == SyntaxKind.LINE_COMMENT
            replace = new_line_and_indent() if needs_line_break else ""
            second_token = scan_next()

        if second_token in _CLOSING:
            if first_token != _CLOSING[second_token]:
                indent_level -= 1
                replace = new_line_and_indent()
        else:
            if first_token in (SyntaxKind.OPEN_BRACE, SyntaxKind.OPEN_BRACKET):
                indent_level += 1
                replace = new_line_and_indent()
            elif first_token == SyntaxKind.COMMA:
                replace = new_line_and_indent()
            elif first_token == SyntaxKind.LINE_COMMENT:
                replace = new_line_and_indent()
            elif first_token == SyntaxKind.BLOCK_COMMENT:
                if line_break:
                    replace = new_line_and_indent()
                elif not needs_line_break:
                    replace = " "
            elif first_token == SyntaxKind.COLON:
                if not needs_line_break:
                    replace = " "
            elif first_token == SyntaxKind.STRING_LITERAL and second_token == SyntaxKind.COLON:
                if not needs_line_break:
                    replace = ""
            elif first_token in _VALUE_END:
                if second_token in _COMMENTS:
                    if not needs_line_break:
                        replace = " "
                elif second_token not in (SyntaxKind.COMMA, SyntaxKind.EOF):
                    has_error = True
            elif first_token == SyntaxKind.UNKNOWN:
                has_error = True
            if line_break and second_token in _COMMENTS:
                replace = new_line_and_indent()

        if second_token == SyntaxKind.EOF:
            replace = eol if options.insert_final_newline else ""

        second_token_start = scanner.token_offset + format_start
        add_edit(replace, first_token_end, second_token_start)
        first_token = second_token

    return edits


__all__ = ["compute_indent_level", "format", "get_eol", "is_eol"]
