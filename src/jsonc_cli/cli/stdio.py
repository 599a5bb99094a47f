"""Standard input and result output for commands."""

import re
import sys

import click

from ..models import OutputOptions

# Unpaired UTF-16 halves, left over from a lone "\ud83d" style escape.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def read_document() -> str:
    """Read all of stdin and decode it as UTF-8.

    Reads the binary stream so line endings reach the engine untouched.

    Raises:
        click.ClickException: If stdin is not valid UTF-8
    """
    data = sys.stdin.buffer.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Could not decode stdin as UTF-8: {e}")


def write_output(result: str, output: OutputOptions) -> None:
    """Write ``result`` to stdout or to ``output.file``.

    Raises:
        click.FileError: If the file cannot be written
    """
    text = _LONE_SURROGATE.sub("\ufffd", output.render(result))
    data = text.encode("utf-8")

    if output.to_stdout:
        stdout = sys.stdout.buffer
        stdout.write(data)
        stdout.flush()
        return

    try:
        with click.open_file(output.file, "wb", atomic=True) as outfile:
            outfile.write(data)
    except OSError as e:
        raise click.FileError(output.file, hint=e.strerror or str(e))
