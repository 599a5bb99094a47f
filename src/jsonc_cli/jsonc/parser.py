"""Error-tolerant JSONC parser.

Three layers, each built on the one before:

- :func:`visit` drives a :class:`JSONVisitor` with begin/end/value events
- :func:`parse_tree` turns those events into a :class:`Node` tree that keeps
  the offset and length of every value, which is what edits are computed from
- :func:`parse` materializes plain Python values directly

Syntax errors never raise. They are appended to the ``errors`` list the
caller passes in and parsing carries on, so a document with a stray comma
or a missing bracket still yields a usable tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Literal, Optional, Sequence, Union

from .scanner import ScanError, Scanner, SyntaxKind

NodeType = Literal["object", "array", "property", "string", "number", "boolean", "null"]
Segment = Union[str, int]
JSONPath = Sequence[Segment]


class ParseErrorCode(IntEnum):
    INVALID_SYMBOL = 1
    INVALID_NUMBER_FORMAT = 2
    PROPERTY_NAME_EXPECTED = 3
    VALUE_EXPECTED = 4
    COLON_EXPECTED = 5
    COMMA_EXPECTED = 6
    CLOSE_BRACE_EXPECTED = 7
    CLOSE_BRACKET_EXPECTED = 8
    END_OF_FILE_EXPECTED = 9
    INVALID_COMMENT_TOKEN = 10
    UNEXPECTED_END_OF_COMMENT = 11
    UNEXPECTED_END_OF_STRING = 12
    UNEXPECTED_END_OF_NUMBER = 13
    INVALID_UNICODE = 14
    INVALID_ESCAPE_CHARACTER = 15
    INVALID_CHARACTER = 16


_SCAN_ERRORS = {
    ScanError.INVALID_UNICODE: ParseErrorCode.INVALID_UNICODE,
    ScanError.INVALID_ESCAPE_CHARACTER: ParseErrorCode.INVALID_ESCAPE_CHARACTER,
    ScanError.UNEXPECTED_END_OF_NUMBER: ParseErrorCode.UNEXPECTED_END_OF_NUMBER,
    ScanError.UNEXPECTED_END_OF_COMMENT: ParseErrorCode.UNEXPECTED_END_OF_COMMENT,
    ScanError.UNEXPECTED_END_OF_STRING: ParseErrorCode.UNEXPECTED_END_OF_STRING,
    ScanError.INVALID_CHARACTER: ParseErrorCode.INVALID_CHARACTER,
}


@dataclass
class ParseError:
    """A syntax problem found at ``offset``."""

    error: ParseErrorCode
    offset: int
    length: int


@dataclass(frozen=True)
class ParseOptions:
    """Parser leniency switches.

    Comments are accepted unless ``disallow_comments`` is set. A trailing
    comma is reported as an error unless ``allow_trailing_comma`` is set, but
    the tree is built either way.
    """

    disallow_comments: bool = False
    allow_trailing_comma: bool = False
    allow_empty_content: bool = False


DEFAULT_PARSE_OPTIONS = ParseOptions()


@dataclass
class Node:
    """A value in the syntax tree.

    ``property`` nodes have two children, the key (a ``string`` node) and the
    value; the value is missing when the document is cut short after the
    colon. ``object`` and ``array`` nodes list their members in ``children``.
    Leaf nodes carry their decoded ``value``.
    """

    type: NodeType
    offset: int
    length: int = -1
    value: Any = None
    colon_offset: Optional[int] = None
    children: Optional[List["Node"]] = None
    parent: Optional["Node"] = field(default=None, repr=False, compare=False)


class JSONVisitor:
    """Receives parse events from :func:`visit`. Override what you need."""

    def on_object_begin(self, offset: int, length: int) -> None:
        pass

    def on_object_property(self, name: str, offset: int, length: int) -> None:
        pass

    def on_object_end(self, offset: int, length: int) -> None:
        pass

    def on_array_begin(self, offset: int, length: int) -> None:
        pass

    def on_array_end(self, offset: int, length: int) -> None:
        pass

    def on_literal_value(self, value: Any, offset: int, length: int) -> None:
        pass

    def on_separator(self, character: str, offset: int, length: int) -> None:
        pass

    def on_comment(self, offset: int, length: int) -> None:
        pass

    def on_error(self, error: ParseErrorCode, offset: int, length: int) -> None:
        pass


def _to_number(raw: str) -> Union[int, float]:
    if any(c in raw for c in ".eE"):
        return float(raw)
    return int(raw)


class _Walker:
    """Recursive-descent driver behind :func:`visit`."""

    def __init__(self, text: str, visitor: JSONVisitor, options: ParseOptions):
        self.scanner = Scanner(text, ignore_trivia=False)
        self.visitor = visitor
        self.options = options

    def _emit(self, handler, *args) -> None:
        handler(*args, self.scanner.token_offset, self.scanner.token_length)

    def scan_next(self) -> SyntaxKind:
        scanner = self.scanner
        while True:
            token = scanner.scan()
            code = _SCAN_ERRORS.get(scanner.scan_error)
            if code is not None and not (
                code is ParseErrorCode.UNEXPECTED_END_OF_COMMENT
                and self.options.disallow_comments
            ):
                self.handle_error(code)

            if token in (SyntaxKind.LINE_COMMENT, SyntaxKind.BLOCK_COMMENT):
                if self.options.disallow_comments:
                    self.handle_error(ParseErrorCode.INVALID_COMMENT_TOKEN)
                else:
                    self._emit(self.visitor.on_comment)
            elif token == SyntaxKind.UNKNOWN:
                self.handle_error(ParseErrorCode.INVALID_SYMBOL)
            elif token not in (SyntaxKind.TRIVIA, SyntaxKind.LINE_BREAK):
                return token

    def handle_error(
        self,
        error: ParseErrorCode,
        skip_until_after: Sequence[SyntaxKind] = (),
        skip_until: Sequence[SyntaxKind] = (),
    ) -> None:
        self._emit(self.visitor.on_error, error)
        if not (skip_until_after or skip_until):
            return
        token = self.scanner.token
        while token != SyntaxKind.EOF:
            if token in skip_until_after:
                self.scan_next()
                break
            if token in skip_until:
                break
            token = self.scan_next()

    def parse_string(self, is_value: bool) -> bool:
        value = self.scanner.value
        if is_value:
            self._emit(self.visitor.on_literal_value, value)
        else:
            self._emit(self.visitor.on_object_property, value)
        self.scan_next()
        return True

    def parse_literal(self) -> bool:
        token = self.scanner.token
        if token == SyntaxKind.NUMERIC_LITERAL:
            try:
                value = _to_number(self.scanner.value)
            except ValueError:
                self.handle_error(ParseErrorCode.INVALID_NUMBER_FORMAT)
                value = 0
            self._emit(self.visitor.on_literal_value, value)
        elif token == SyntaxKind.NULL_KEYWORD:
            self._emit(self.visitor.on_literal_value, None)
        elif token == SyntaxKind.TRUE_KEYWORD:
            self._emit(self.visitor.on_literal_value, True)
        elif token == SyntaxKind.FALSE_KEYWORD:
            self._emit(self.visitor.on_literal_value, False)
        else:
            return False
        self.scan_next()
        return True

    def parse_property(self) -> bool:
        if self.scanner.token != SyntaxKind.STRING_LITERAL:
            self.handle_error(
                ParseErrorCode.PROPERTY_NAME_EXPECTED,
                (),
                (SyntaxKind.CLOSE_BRACE, SyntaxKind.COMMA),
            )
            return False
        self.parse_string(is_value=False)
        if self.scanner.token == SyntaxKind.COLON:
            self._emit(self.visitor.on_separator, ":")
            self.scan_next()
            if not self.parse_value():
                self.handle_error(
                    ParseErrorCode.VALUE_EXPECTED,
                    (),
                    (SyntaxKind.CLOSE_BRACE, SyntaxKind.COMMA),
                )
        else:
            self.handle_error(
                ParseErrorCode.COLON_EXPECTED,
                (),
                (SyntaxKind.CLOSE_BRACE, SyntaxKind.COMMA),
            )
        return True

    def parse_object(self) -> bool:
        self._emit(self.visitor.on_object_begin)
        self.scan_next()
        needs_comma = False
        while self.scanner.token not in (SyntaxKind.CLOSE_BRACE, SyntaxKind.EOF):
            if self.scanner.token == SyntaxKind.COMMA:
                if not needs_comma:
                    self.handle_error(ParseErrorCode.VALUE_EXPECTED)
                self._emit(self.visitor.on_separator, ",")
                self.scan_next()
                if (
                    self.scanner.token == SyntaxKind.CLOSE_BRACE
                    and self.options.allow_trailing_comma
                ):
                    break
            elif needs_comma:
                self.handle_error(ParseErrorCode.COMMA_EXPECTED)
            if not self.parse_property():
                self.handle_error(
                    ParseErrorCode.VALUE_EXPECTED,
                    (),
                    (SyntaxKind.CLOSE_BRACE, SyntaxKind.COMMA),
                )
            needs_comma = True
        self._emit(self.visitor.on_object_end)
        if self.scanner.token != SyntaxKind.CLOSE_BRACE:
            self.handle_error(
                ParseErrorCode.CLOSE_BRACE_EXPECTED, (SyntaxKind.CLOSE_BRACE,), ()
            )
        else:
            self.scan_next()
        return True

    def parse_array(self) -> bool:
        self._emit(self.visitor.on_array_begin)
        self.scan_next()
        needs_comma = False
        while self.scanner.token not in (SyntaxKind.CLOSE_BRACKET, SyntaxKind.EOF):
            if self.scanner.token == SyntaxKind.COMMA:
                if not needs_comma:
                    self.handle_error(ParseErrorCode.VALUE_EXPECTED)
                self._emit(self.visitor.on_separator, ",")
                self.scan_next()
                if (
                    self.scanner.token == SyntaxKind.CLOSE_BRACKET
                    and self.options.allow_trailing_comma
                ):
                    break
            elif needs_comma:
                self.handle_error(ParseErrorCode.COMMA_EXPECTED)
            if not self.parse_value():
                self.handle_error(
                    ParseErrorCode.VALUE_EXPECTED,
                    (),
                    (SyntaxKind.CLOSE_BRACKET, SyntaxKind.COMMA),
                )
            needs_comma = True
        self._emit(self.visitor.on_array_end)
        if self.scanner.token != SyntaxKind.CLOSE_BRACKET:
            self.handle_error(
                ParseErrorCode.CLOSE_BRACKET_EXPECTED, (SyntaxKind.CLOSE_BRACKET,), ()
            )
        else:
            self.scan_next()
        return True

    def parse_value(self) -> bool:
        token = self.scanner.token
        if token == SyntaxKind.OPEN_BRACKET:
            return self.parse_array()
        if token == SyntaxKind.OPEN_BRACE:
            return self.parse_object()
        if token == SyntaxKind.STRING_LITERAL:
            return self.parse_string(is_value=True)
        return self.parse_literal()

    def run(self) -> bool:
        self.scan_next()
        if self.scanner.token == SyntaxKind.EOF:
            if self.options.allow_empty_content:
                return True
            self.handle_error(ParseErrorCode.VALUE_EXPECTED)
            return False
        if not self.parse_value():
            self.handle_error(ParseErrorCode.VALUE_EXPECTED)
            return False
        if self.scanner.token != SyntaxKind.EOF:
            self.handle_error(ParseErrorCode.END_OF_FILE_EXPECTED)
        return True


def visit(
    text: str, visitor: JSONVisitor, options: Optional[ParseOptions] = None
) -> bool:
    """Parse ``text`` and report every structural event to ``visitor``.

    Returns:
        False when no value could be parsed at all, True otherwise (even if
        errors were reported along the way)
    """
    return _Walker(text, visitor, options or DEFAULT_PARSE_OPTIONS).run()


class _TreeBuilder(JSONVisitor):
    def __init__(self, errors: Optional[List[ParseError]]):
        self.errors = errors
        # Synthetic holder; the document root ends up as its only child.
        self.current = Node(type="array", offset=-1, children=[])

    def _add(self, node: Node) -> Node:
        node.parent = self.current
        self.current.children.append(node)
        return node

    def _ensure_property_complete(self, end_offset: int) -> None:
        if self.current.type == "property":
            self.current.length = end_offset - self.current.offset
            self.current = self.current.parent

    def on_object_begin(self, offset, length):
        self.current = self._add(Node(type="object", offset=offset, children=[]))

    def on_object_property(self, name, offset, length):
        prop = self._add(Node(type="property", offset=offset, children=[]))
        prop.children.append(
            Node(type="string", offset=offset, length=length, value=name, parent=prop)
        )
        self.current = prop

    def on_object_end(self, offset, length):
        # A property still open here lost its value to an error.
        self._ensure_property_complete(offset + length)
        self.current.length = offset + length - self.current.offset
        self.current = self.current.parent
        self._ensure_property_complete(offset + length)

    def on_array_begin(self, offset, length):
        self.current = self._add(Node(type="array", offset=offset, children=[]))

    def on_array_end(self, offset, length):
        self.current.length = offset + length - self.current.offset
        self.current = self.current.parent
        self._ensure_property_complete(offset + length)

    def on_literal_value(self, value, offset, length):
        self._add(
            Node(type=_node_type(value), offset=offset, length=length, value=value)
        )
        self._ensure_property_complete(offset + length)

    def on_separator(self, character, offset, length):
        if self.current.type == "property":
            if character == ":":
                self.current.colon_offset = offset
            elif character == ",":
                self._ensure_property_complete(offset)

    def on_error(self, error, offset, length):
        if self.errors is not None:
            self.errors.append(ParseError(error, offset, length))


def _node_type(value: Any) -> NodeType:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    return "object"


def parse_tree(
    text: str,
    errors: Optional[List[ParseError]] = None,
    options: Optional[ParseOptions] = None,
) -> Optional[Node]:
    """Parse ``text`` into a syntax tree.

    Args:
        text: JSONC document
        errors: Optional list that receives a :class:`ParseError` per problem
        options: Parser leniency switches

    Returns:
        Root node, or None if the text holds no value at all
    """
    builder = _TreeBuilder(errors)
    visit(text, builder, options)
    if not builder.current.children:
        return None
    root = builder.current.children[0]
    root.parent = None
    return root


class _ValueBuilder(JSONVisitor):
    def __init__(self, errors: Optional[List[ParseError]]):
        self.errors = errors
        self.stack: List[Any] = [[]]
        self.keys: List[Optional[str]] = [None]

    def _add(self, value: Any) -> None:
        container = self.stack[-1]
        if isinstance(container, list):
            container.append(value)
        elif self.keys[-1] is not None:
            container[self.keys[-1]] = value

    def on_object_begin(self, offset, length):
        obj: dict = {}
        self._add(obj)
        self.stack.append(obj)
        self.keys.append(None)

    def on_object_property(self, name, offset, length):
        self.keys[-1] = name

    def on_object_end(self, offset, length):
        self.stack.pop()
        self.keys.pop()

    def on_array_begin(self, offset, length):
        arr: list = []
        self._add(arr)
        self.stack.append(arr)
        self.keys.append(None)

    def on_array_end(self, offset, length):
        self.stack.pop()
        self.keys.pop()

    def on_literal_value(self, value, offset, length):
        self._add(value)

    def on_error(self, error, offset, length):
        if self.errors is not None:
            self.errors.append(ParseError(error, offset, length))


def parse(
    text: str,
    errors: Optional[List[ParseError]] = None,
    options: Optional[ParseOptions] = None,
) -> Any:
    """Parse ``text`` straight to Python values (dict, list, str, ...)."""
    builder = _ValueBuilder(errors)
    visit(text, builder, options)
    root = builder.stack[0]
    return root[0] if root else None


def find_node_at_location(root: Optional[Node], path: JSONPath) -> Optional[Node]:
    """Follow ``path`` from ``root``.

    String segments select object properties, integer segments select array
    elements. Returns None as soon as a segment does not match.
    """
    if root is None:
        return None
    node = root
    for segment in path:
        if isinstance(segment, str):
            if node.type != "object" or node.children is None:
                return None
            for prop in node.children:
                if (
                    prop.children
                    and len(prop.children) == 2
                    and prop.children[0].value == segment
                ):
                    node = prop.children[1]
                    break
            else:
                return None
        else:
            if (
                node.type != "array"
                or node.children is None
                or isinstance(segment, bool)
                or not isinstance(segment, int)
                or not 0 <= segment < len(node.children)
            ):
                return None
            node = node.children[segment]
    return node


def get_node_path(node: Node) -> List[Segment]:
    """Return the path from the root to ``node``."""
    parent = node.parent
    if parent is None or parent.children is None:
        return []
    path = get_node_path(parent)
    if parent.type == "property":
        path.append(parent.children[0].value)
    elif parent.type == "array":
        path.append(next(i for i, child in enumerate(parent.children) if child is node))
    return path


def get_node_value(node: Node) -> Any:
    """Materialize the Python value of ``node`` and everything below it."""
    if node.type == "array":
        return [get_node_value(child) for child in node.children or []]
    if node.type == "object":
        obj = {}
        for prop in node.children or []:
            if prop.children and len(prop.children) > 1:
                obj[prop.children[0].value] = get_node_value(prop.children[1])
        return obj
    if node.type in ("null", "string", "number", "boolean"):
        return node.value
    return None


__all__ = [
    "DEFAULT_PARSE_OPTIONS",
    "JSONPath",
    "JSONVisitor",
    "Node",
    "NodeType",
    "ParseError",
    "ParseErrorCode",
    "ParseOptions",
    "Segment",
    "find_node_at_location",
    "get_node_path",
    "get_node_value",
    "parse",
    "parse_tree",
    "visit",
]
