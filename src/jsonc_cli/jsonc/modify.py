"""Compute the edits that set, insert or remove a value at a JSONPath."""

from __future__ import annotations

import json
import math
import re
from typing import Any, List, Optional

from ..models import ModificationOptions
from .edits import Edit, Range, apply_edit
from .errors import ModificationError
from .formatter import format, is_eol
from .parser import JSONPath, Node, find_node_at_location, parse_tree


class _Remove:
    def __repr__(self) -> str:
        return "REMOVE"


REMOVE: Any = _Remove()
"""Pass as the value to :func:`modify` to delete the node at the path."""


# Largest magnitude JavaScript still prints in plain digits.
_PLAIN_NUMBER_LIMIT = 1e21
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _json_number(value: float) -> Any:
    if math.isinf(value) or math.isnan(value):
        return None
    if value.is_integer() and abs(value) < _PLAIN_NUMBER_LIMIT:
        return int(value)
    return value


def _json_ready(value: Any) -> Any:
    """Map Python values onto what JavaScript's JSON.stringify would print."""
    if isinstance(value, float):
        return _json_number(value)
    if isinstance(value, dict):
        return {key: _json_ready(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_ready(item) for item in value]
    return value


def to_json(value: Any, indent: Optional[int] = None) -> str:
    """JSON text for ``value``, as injected into documents or printed.

    Compact unless ``indent`` is given. Numbers print the way JSON.stringify
    prints them (``100`` for ``1e2``, ``null`` for an overflow); unpaired
    surrogates become ``\\u`` escapes.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        _json_ready(value),
        ensure_ascii=False,
        allow_nan=False,
        indent=indent,
        separators=separators,
    )
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def modify(
    text: str,
    path: JSONPath,
    value: Any,
    options: Optional[ModificationOptions] = None,
) -> List[Edit]:
    """Compute the edits that set the value at ``path`` to ``value``.

    Missing intermediate objects and arrays are created. Pass :data:`REMOVE`
    as ``value`` to delete the node instead; deleting a property that does
    not exist is a no-op.

    Args:
        text: JSONC document
        path: Location of the value, ``[]`` for the root
        value: New value (any JSON-serializable object) or :data:`REMOVE`
        options: Formatting for the injected text and array insertion mode

    Returns:
        Edits to pass to ``apply_edits``; at most one

    Raises:
        ModificationError: If the change cannot be made at that location
    """
    return set_property(text, path, value, options or ModificationOptions())


def remove_property(
    text: str, path: JSONPath, options: Optional[ModificationOptions] = None
) -> List[Edit]:
    return set_property(text, path, REMOVE, options or ModificationOptions())


def set_property(
    text: str, path: JSONPath, value: Any, options: ModificationOptions
) -> List[Edit]:
    remaining = list(path)
    root = parse_tree(text, [])
    parent: Optional[Node] = None
    last_segment = None

    # Walk up until an existing parent is found, wrapping the value in the
    # containers that have to be created on the way.
    while remaining:
        last_segment = remaining.pop()
        parent = find_node_at_location(root, remaining)
        if parent is None and value is not REMOVE:
            if isinstance(last_segment, str):
                value = {last_segment: value}
            else:
                value = [value]
        else:
            break

    if parent is None:
        if value is REMOVE:
            raise ModificationError("Can not delete in empty document")
        edit = Edit(
            offset=root.offset if root else 0,
            length=root.length if root else 0,
            content=to_json(value),
        )
        return _with_formatting(text, edit, options)

    if parent.type == "object" and isinstance(last_segment, str):
        return _object_edit(text, parent, last_segment, value, options)
    if (
        parent.type == "array"
        and isinstance(last_segment, int)
        and not isinstance(last_segment, bool)
    ):
        return _array_edit(text, parent, last_segment, value, options)

    kind = "property" if isinstance(last_segment, str) else "index"
    raise ModificationError(f"Can not add {kind} to parent of type {parent.type}")


def _object_edit(
    text: str, parent: Node, key: str, value: Any, options: ModificationOptions
) -> List[Edit]:
    children = parent.children or []
    existing = find_node_at_location(parent, [key])

    if existing is not None:
        prop = existing.parent
        if value is not REMOVE:
            edit = Edit(existing.offset, existing.length, to_json(value))
            return _with_formatting(text, edit, options)

        index = next(i for i, child in enumerate(children) if child is prop)
        remove_end = prop.offset + prop.length
        if index > 0:
            # Take the comma that precedes the property with it.
            previous = children[index - 1]
            remove_begin = previous.offset + previous.length
        else:
            remove_begin = parent.offset + 1
            if len(children) > 1:
                # First property: take the comma that follows instead.
                remove_end = children[1].offset
        edit = Edit(remove_begin, remove_end - remove_begin, "")
        return _with_formatting(text, edit, options)

    if value is REMOVE:
        return []

    new_property = f"{to_json(key)}: {to_json(value)}"
    if options.get_insertion_index is not None:
        index = options.get_insertion_index([p.children[0].value for p in children])
    else:
        index = len(children)

    if index > 0:
        previous = children[index - 1]
        edit = Edit(previous.offset + previous.length, 0, "," + new_property)
    elif not children:
        edit = Edit(parent.offset + 1, 0, new_property)
    else:
        edit = Edit(parent.offset + 1, 0, new_property + ",")
    return _with_formatting(text, edit, options)


def _array_edit(
    text: str, parent: Node, index: int, value: Any, options: ModificationOptions
) -> List[Edit]:
    children = parent.children or []

    if index == -1:
        if value is REMOVE:
            raise ModificationError("Can not remove Array index -1")
        content = to_json(value)
        if not children:
            edit = Edit(parent.offset + 1, 0, content)
        else:
            previous = children[-1]
            edit = Edit(previous.offset + previous.length, 0, "," + content)
        return _with_formatting(text, edit, options)

    if index < 0:
        action = "remove" if value is REMOVE else "modify"
        raise ModificationError(f"Can not {action} negative Array index {index}")

    if value is REMOVE:
        if index >= len(children):
            raise ModificationError(
                f"Can not remove Array index {index} as length is not sufficient"
            )
        to_remove = children[index]
        if len(children) == 1:
            # Only item: empty the brackets completely.
            edit = Edit(parent.offset + 1, parent.length - 2, "")
        elif index == len(children) - 1:
            previous = children[index - 1]
            start = previous.offset + previous.length
            edit = Edit(start, to_remove.offset + to_remove.length - start, "")
        else:
            edit = Edit(
                to_remove.offset, children[index + 1].offset - to_remove.offset, ""
            )
        return _with_formatting(text, edit, options)

    content = to_json(value)
    if not options.is_array_insertion and index < len(children):
        target = children[index]
        edit = Edit(target.offset, target.length, content)
    elif not children or index == 0:
        edit = Edit(parent.offset + 1, 0, content if not children else content + ",")
    else:
        previous = children[min(index, len(children)) - 1]
        edit = Edit(previous.offset + previous.length, 0, "," + content)
    return _with_formatting(text, edit, options)


def _with_formatting(
    text: str, edit: Edit, options: ModificationOptions
) -> List[Edit]:
    """Format the text around ``edit`` and fold the result into one edit."""
    if options.formatting_options is None:
        return [edit]

    new_text = apply_edit(text, edit)
    begin = edit.offset
    end = edit.offset + len(edit.content)
    if edit.length == 0 or not edit.content:
        # Pure insert or removal: format the whole affected line.
        while begin > 0 and not is_eol(new_text, begin - 1):
            begin -= 1
        while end < len(new_text) and not is_eol(new_text, end):
            end += 1

    format_edits = format(
        new_text, Range(begin, end - begin), options.formatting_options
    )
    for format_edit in reversed(format_edits):
        new_text = apply_edit(new_text, format_edit)
        begin = min(begin, format_edit.offset)
        end = max(end, format_edit.end)
        end += len(format_edit.content) - format_edit.length

    length = len(text) - (len(new_text) - end) - begin
    return [Edit(begin, length, new_text[begin:end])]


__all__ = ["REMOVE", "modify", "remove_property", "set_property", "to_json"]
