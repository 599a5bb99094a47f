"""Configuration records shared by the CLI and the JSONC engine."""

from .formatting import EOL, FormattingOptions, ModificationOptions
from .output import STDOUT, OutputOptions

__all__ = [
    "EOL",
    "FormattingOptions",
    "ModificationOptions",
    "OutputOptions",
    "STDOUT",
]
