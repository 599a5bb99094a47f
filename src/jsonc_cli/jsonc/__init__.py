"""JSONC engine: tolerant parsing, edit computation and formatting.

Every operation works on the document text and returns either a value or a
list of :class:`Edit` objects; nothing is modified in place.

Operations:
    modify(text, path, value, options)   -> [Edit]   (value=REMOVE deletes)
    format(text, range, options)         -> [Edit]
    apply_edits(text, edits)             -> str
    parse_tree(text)                     -> Node | None
    find_node_at_location(root, path)    -> Node | None
    get_node_value(node)                 -> Any
"""

from ..models import FormattingOptions, ModificationOptions
from .edits import Edit, Range, apply_edit, apply_edits
from .errors import EditOverlapError, JSONCError, ModificationError
from .formatter import format
from .modify import REMOVE, modify, remove_property, to_json
from .parser import (
    JSONPath,
    JSONVisitor,
    Node,
    ParseError,
    ParseErrorCode,
    ParseOptions,
    find_node_at_location,
    get_node_path,
    get_node_value,
    parse,
    parse_tree,
    visit,
)
from .scanner import Scanner, ScanError, SyntaxKind, create_scanner

__all__ = [
    "Edit",
    "EditOverlapError",
    "FormattingOptions",
    "JSONCError",
    "JSONPath",
    "JSONVisitor",
    "ModificationError",
    "ModificationOptions",
    "Node",
    "ParseError",
    "ParseErrorCode",
    "ParseOptions",
    "REMOVE",
    "Range",
    "ScanError",
    "Scanner",
    "SyntaxKind",
    "apply_edit",
    "apply_edits",
    "create_scanner",
    "find_node_at_location",
    "format",
    "get_node_path",
    "get_node_value",
    "modify",
    "parse",
    "parse_tree",
    "remove_property",
    "to_json",
    "visit",
]
