"""Modify command - set, insert or delete the value at a JSONPath."""

import sys

import click

from ... import jsonc
from ...models import ModificationOptions
from ..options import (
    build_formatting_options,
    build_output_options,
    explicit_insert_spaces,
    formatting_options,
    has_formatting_options,
    output_options,
)
from ..stdio import read_document, write_output
from ..validation import JSONPATH, parse_json_value


@click.command()
@click.option(
    "-p",
    "--JSONPath",
    "json_path",
    required=True,
    type=JSONPATH,
    help="Pass like -p '[1, \"someKey\"]'. Corresponds to the type (string | number)[]",
)
@click.option("-d", "--delete", is_flag=True, help="Delete value at path")
@click.option(
    "-v",
    "--value",
    help="What to replace the found node with, as JSON (e.g. -v '\"text\"', -v 123)",
)
@click.option(
    "-i",
    "--is-array-insertion",
    is_flag=True,
    help="If JSONPath refers to an index of an array, insert a new item at "
    "that location instead of overwriting its contents.",
)
@formatting_options
@output_options
@click.pass_context
def modify(
    ctx,
    json_path,
    delete,
    value,
    is_array_insertion,
    tab_size,
    insert_spaces,
    eol,
    no_newline,
    format_output,
    file,
):
    """Modify a JSONC document from stdin.

    Formatting options are only applied to the injected JSON, unless
    --format/-m is given, in which case the whole result is formatted.

    Examples:
        echo '{"a": 1}' | jsonc modify -p '["a"]' -v 2
        echo '{"a": 1}' | jsonc modify -p '["b", "c"]' -v '"new"'
        echo '[1, 2]' | jsonc modify -p '[0]' -v 0 -i
        echo '[1, 2]' | jsonc modify -p '[1]' -d
    """
    if not delete and value is None:
        raise click.UsageError("You must provide either --delete/-d or --value/-v")
    if delete and value is not None:
        raise click.UsageError(
            "You can't provide --delete/-d AND --value/-v at the same time, "
            "pick one of the options"
        )

    new_value = jsonc.REMOVE if delete else parse_json_value(value)
    insert_spaces = explicit_insert_spaces(ctx, insert_spaces)
    formatting = None
    if has_formatting_options(tab_size, insert_spaces, eol, format_output):
        formatting = build_formatting_options(tab_size, insert_spaces, eol)
    output = build_output_options(no_newline, file)

    buffer = read_document()

    try:
        edits = jsonc.modify(
            buffer,
            json_path,
            new_value,
            ModificationOptions(
                formatting_options=formatting,
                is_array_insertion=is_array_insertion,
            ),
        )
    except jsonc.ModificationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = jsonc.apply_edits(buffer, edits)
    if format_output and formatting is not None:
        result = jsonc.apply_edits(result, jsonc.format(result, None, formatting))

    write_output(result, output)
