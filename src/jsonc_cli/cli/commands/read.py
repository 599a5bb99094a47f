"""Read command - print the value at a JSONPath."""

import sys

import click

from ...jsonc import find_node_at_location, get_node_value, parse_tree, to_json
from ..options import build_output_options, output_options
from ..stdio import read_document, write_output
from ..validation import JSONPATH


@click.command()
@click.argument(
    "json_path", metavar="[JSONPATH]", required=False, default="[]", type=JSONPATH
)
@click.option(
    "-r", "--raw", is_flag=True, help="Output strings without quotes"
)
@output_options
def read(json_path, raw, no_newline, format_output, file):
    """Prints the JSON value at the given path in a JSONC document from stdin.

    JSONPATH is a JSON array like '[1, "someKey"]' (type (string | number)[]);
    it defaults to the document root.

    Examples:
        echo '{"a": [1, "two"]}' | jsonc read '["a", 1]'      # "two"
        echo '{"a": [1, "two"]}' | jsonc read '["a", 1]' -r   # two
        echo '{"a": 1} // note' | jsonc read -m               # pretty JSON
    """
    output = build_output_options(no_newline, file)
    buffer = read_document()

    tree = parse_tree(buffer)
    if tree is None:
        click.echo("Error: Invalid JSONC on stdin", err=True)
        sys.exit(1)

    leaf = find_node_at_location(tree, json_path)
    if leaf is None:
        click.echo(
            "Error: Invalid JSONPath, could not find the value in the JSONC document",
            err=True,
        )
        sys.exit(1)

    value = get_node_value(leaf)
    if raw and isinstance(value, str):
        write_output(value, output)
    elif format_output:
        write_output(to_json(value, indent=2), output)
    else:
        write_output(to_json(value), output)
