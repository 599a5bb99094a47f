"""Where and how a command's result is written."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

STDOUT = "-"


class OutputOptions(BaseModel):
    """Result destination.

    ``file`` of None or ``"-"`` means standard output.
    """

    no_newline: bool = False
    file: Optional[str] = None

    @property
    def to_stdout(self) -> bool:
        return not self.file or self.file == STDOUT

    def render(self, result: str) -> str:
        """Return ``result`` with the trailing newline applied."""
        return result if self.no_newline else result + "\n"


__all__ = ["OutputOptions", "STDOUT"]
