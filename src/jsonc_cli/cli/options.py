"""Option groups shared across commands and the records built from them."""

from typing import Optional

import click
from click.core import ParameterSource

from ..models import FormattingOptions, OutputOptions

EOL_CHOICES = {"lf": "\n", "crlf": "\r\n"}
DEFAULT_TAB_SIZE = 2


def output_options(f):
    """Add ``--no-newline``, ``--format`` and ``--file``."""
    f = click.option(
        "-f",
        "--file",
        "file",
        type=click.Path(dir_okay=False, allow_dash=True),
        help="If provided will write file to location instead of stdout",
    )(f)
    f = click.option(
        "-m", "--format", "format_output", is_flag=True, help="Will format the output"
    )(f)
    f = click.option(
        "-n",
        "--no-newline",
        "no_newline",
        is_flag=True,
        help="Print without trailing new-line",
    )(f)
    return f


def formatting_options(f):
    """Add ``--tab-size``, ``--insert-spaces/--no-insert-spaces`` and ``--eol``."""
    f = click.option(
        "--eol",
        type=click.Choice(sorted(EOL_CHOICES)),
        help="The default 'end of line' character",
    )(f)
    f = click.option(
        "-s",
        "--insert-spaces/--no-insert-spaces",
        "insert_spaces",
        help="Is indentation based on spaces?",
    )(f)
    f = click.option(
        "-t",
        "--tab-size",
        type=click.IntRange(min=1),
        help="If indentation is based on spaces (--insert-spaces/-s), "
        "then what is the number of spaces that make an indent?",
    )(f)
    return f


def explicit_insert_spaces(ctx: click.Context, insert_spaces: bool) -> Optional[bool]:
    """Return the flag value only if it was given on the command line."""
    if ctx.get_parameter_source("insert_spaces") in (
        None,
        ParameterSource.DEFAULT,
    ):
        return None
    return insert_spaces


def has_formatting_options(
    tab_size: Optional[int],
    insert_spaces: Optional[bool],
    eol: Optional[str],
    format_output: bool,
) -> bool:
    return bool(
        tab_size is not None
        or insert_spaces is not None
        or eol is not None
        or format_output
    )


def build_formatting_options(
    tab_size: Optional[int], insert_spaces: Optional[bool], eol: Optional[str]
) -> FormattingOptions:
    """Formatting options with defaults for everything not given."""
    return FormattingOptions(
        tab_size=tab_size or DEFAULT_TAB_SIZE,
        insert_spaces=True if insert_spaces is None else insert_spaces,
        eol=EOL_CHOICES.get(eol or "lf", "\n"),
    )


def build_output_options(no_newline: bool, file: Optional[str]) -> OutputOptions:
    return OutputOptions(no_newline=no_newline, file=file)
