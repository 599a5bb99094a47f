"""Unit tests for the JSONC scanner."""

from jsonc_cli.jsonc import ScanError, SyntaxKind, create_scanner


def _tokens(text, ignore_trivia=True):
    scanner = create_scanner(text, ignore_trivia)
    tokens = []
    while scanner.scan() != SyntaxKind.EOF:
        tokens.append((scanner.token, scanner.value))
    return tokens


def _single(text):
    scanner = create_scanner(text)
    scanner.scan()
    return scanner


class TestTokens:
    """Test token kinds and values."""

    def test_punctuation_and_literals(self):
        assert _tokens('{"a": -1.5e3, "b": [true, false, null]}') == [
            (SyntaxKind.OPEN_BRACE, "{"),
            (SyntaxKind.STRING_LITERAL, "a"),
            (SyntaxKind.COLON, ":"),
            (SyntaxKind.NUMERIC_LITERAL, "-1.5e3"),
            (SyntaxKind.COMMA, ","),
            (SyntaxKind.STRING_LITERAL, "b"),
            (SyntaxKind.COLON, ":"),
            (SyntaxKind.OPEN_BRACKET, "["),
            (SyntaxKind.TRUE_KEYWORD, "true"),
            (SyntaxKind.COMMA, ","),
            (SyntaxKind.FALSE_KEYWORD, "false"),
            (SyntaxKind.COMMA, ","),
            (SyntaxKind.NULL_KEYWORD, "null"),
            (SyntaxKind.CLOSE_BRACKET, "]"),
            (SyntaxKind.CLOSE_BRACE, "}"),
        ]

    def test_trivia_is_reported(self):
        kinds = [kind for kind, _ in _tokens("1 // c\n/* b */\r\n2", ignore_trivia=False)]
        assert kinds == [
            SyntaxKind.NUMERIC_LITERAL,
            SyntaxKind.TRIVIA,
            SyntaxKind.LINE_COMMENT,
            SyntaxKind.LINE_BREAK,
            SyntaxKind.BLOCK_COMMENT,
            SyntaxKind.LINE_BREAK,
            SyntaxKind.NUMERIC_LITERAL,
        ]

    def test_ignore_trivia_skips_comments(self):
        assert _tokens("[1 /* x */, // y\n 2]") == [
            (SyntaxKind.OPEN_BRACKET, "["),
            (SyntaxKind.NUMERIC_LITERAL, "1"),
            (SyntaxKind.COMMA, ","),
            (SyntaxKind.NUMERIC_LITERAL, "2"),
            (SyntaxKind.CLOSE_BRACKET, "]"),
        ]

    def test_crlf_is_one_line_break(self):
        scanner = _single("\r\n")
        assert scanner.token == SyntaxKind.LINE_BREAK
        assert scanner.value == "\r\n"
        assert scanner.token_length == 2

    def test_bom_is_whitespace(self):
        assert _tokens("\ufeff{}") == [
            (SyntaxKind.OPEN_BRACE, "{"),
            (SyntaxKind.CLOSE_BRACE, "}"),
        ]

    def test_bare_word_is_unknown(self):
        assert _tokens("hello") == [(SyntaxKind.UNKNOWN, "hello")]

    def test_lone_minus_is_unknown(self):
        assert _tokens("-") == [(SyntaxKind.UNKNOWN, "-")]

    def test_offsets(self):
        scanner = create_scanner('  "ab"', ignore_trivia=True)
        assert scanner.scan() == SyntaxKind.STRING_LITERAL
        assert scanner.token_offset == 2
        assert scanner.token_length == 4
        assert scanner.scan() == SyntaxKind.EOF
        assert scanner.token_offset == 6

    def test_line_tracking(self):
        scanner = create_scanner('[\n  "b"]', ignore_trivia=True)
        scanner.scan()
        scanner.scan()
        assert scanner.token_start_line == 1
        assert scanner.token_start_character == 2


class TestStrings:
    """Test string decoding and string errors."""

    def test_escapes(self):
        scanner = _single(r'"a\nb\t\"\\\/A"')
        assert scanner.value == 'a\nb\t"\\/A'
        assert scanner.scan_error == ScanError.NONE

    def test_surrogate_pair_escape(self):
        scanner = _single(r'"\ud83d\ude00"')
        assert scanner.value == "\U0001F600"
        assert scanner.scan_error == ScanError.NONE

    def test_unpaired_high_surrogate_escape(self):
        assert _single(r'"\ud83dx"').value == "\ud83dx"
        assert _single(r'"\ud83d\u0041"').value == "\ud83dA"

    def test_unterminated(self):
        scanner = _single('"abc')
        assert scanner.token == SyntaxKind.STRING_LITERAL
        assert scanner.value == "abc"
        assert scanner.scan_error == ScanError.UNEXPECTED_END_OF_STRING

    def test_line_break_ends_string(self):
        scanner = _single('"ab\ncd"')
        assert scanner.value == "ab"
        assert scanner.scan_error == ScanError.UNEXPECTED_END_OF_STRING

    def test_invalid_escape(self):
        assert _single(r'"\q"').scan_error == ScanError.INVALID_ESCAPE_CHARACTER

    def test_invalid_unicode(self):
        assert _single(r'"\u12"').scan_error == ScanError.INVALID_UNICODE

    def test_control_character(self):
        assert _single('"a\x01"').scan_error == ScanError.INVALID_CHARACTER


class TestNumbersAndComments:
    """Test numeric literal and comment edge cases."""

    def test_number_without_fraction_digits(self):
        scanner = _single("1.")
        assert scanner.token == SyntaxKind.NUMERIC_LITERAL
        assert scanner.scan_error == ScanError.UNEXPECTED_END_OF_NUMBER

    def test_number_with_bad_exponent(self):
        scanner = _single("2e+")
        assert scanner.value == "2"
        assert scanner.scan_error == ScanError.UNEXPECTED_END_OF_NUMBER

    def test_leading_zero_stops_number(self):
        assert _tokens("01") == [
            (SyntaxKind.NUMERIC_LITERAL, "0"),
            (SyntaxKind.NUMERIC_LITERAL, "1"),
        ]

    def test_unterminated_block_comment(self):
        scanner = _single("/* open")
        assert scanner.token == SyntaxKind.BLOCK_COMMENT
        assert scanner.scan_error == ScanError.UNEXPECTED_END_OF_COMMENT
        assert scanner.token_length == 7

    def test_single_slash_is_unknown(self):
        assert _single("/").token == SyntaxKind.UNKNOWN
