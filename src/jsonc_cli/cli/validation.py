"""Input validation helpers for CLI commands."""

import json
from typing import Any, List, Union

import click

Segment = Union[str, int, float]


class InvalidJSONPathError(ValueError):
    """A JSONPath argument that is not a JSON array of strings and numbers."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(raw: str) -> Any:
    """``json.loads`` without the NaN / Infinity extensions."""
    return json.loads(raw, parse_constant=_reject_constant)


def parse_json_path(raw: str) -> List[Segment]:
    """Parse a JSONPath given on the command line.

    Args:
        raw: JSON array literal, e.g. ``'[1, "someKey"]'``

    Returns:
        Path segments; integral numbers become ``int`` indexes

    Raises:
        InvalidJSONPathError: If ``raw`` is not JSON or not an array of
            strings and numbers
    """
    if not raw:
        return []
    try:
        path = loads_strict(raw)
    except ValueError:
        raise InvalidJSONPathError(f"Invalid JSONPath, could not parse JSON: {raw}")

    if not isinstance(path, list) or not all(
        isinstance(segment, (str, int, float)) and not isinstance(segment, bool)
        for segment in path
    ):
        raise InvalidJSONPathError(
            f"Invalid JSONPath, expected an array of string|number: {raw}"
        )
    return [
        int(segment)
        if isinstance(segment, float) and segment.is_integer()
        else segment
        for segment in path
    ]


class JSONPathType(click.ParamType):
    """Click parameter type for ``[1, "someKey"]`` style paths."""

    name = "jsonpath"

    def convert(self, value, param, ctx):
        if isinstance(value, list):
            return value
        try:
            return parse_json_path(value)
        except InvalidJSONPathError as e:
            self.fail(str(e), param, ctx)


JSONPATH = JSONPathType()


def parse_json_value(raw: str, param_hint: str = "'--value' / '-v'") -> Any:
    """Parse the JSON literal given as a new value.

    Raises:
        click.BadParameter: If ``raw`` is not valid JSON
    """
    try:
        return loads_strict(raw)
    except ValueError as e:
        raise click.BadParameter(
            f"Invalid value, could not parse JSON: {raw} ({e})",
            param_hint=param_hint,
        )
