"""Format command - pretty-print a JSONC document."""

import click

from ... import jsonc
from ..options import (
    build_formatting_options,
    build_output_options,
    explicit_insert_spaces,
    formatting_options,
    output_options,
)
from ..stdio import read_document, write_output


@click.command("format")
@formatting_options
@output_options
@click.pass_context
def format_(ctx, tab_size, insert_spaces, eol, no_newline, format_output, file):
    """Format a JSONC document from stdin.

    Comments are kept. Indentation defaults to 2 spaces; the document's own
    line ending wins over --eol when it has one.

    Examples:
        cat settings.json | jsonc format
        cat settings.json | jsonc format -t 4 -f settings.json
        cat settings.json | jsonc format --no-insert-spaces --eol crlf
    """
    options = build_formatting_options(
        tab_size, explicit_insert_spaces(ctx, insert_spaces), eol
    )
    output = build_output_options(no_newline, file)
    buffer = read_document()

    edits = jsonc.format(buffer, None, options)
    write_output(jsonc.apply_edits(buffer, edits), output)
