"""Text edits and their application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import EditOverlapError


@dataclass(frozen=True)
class Range:
    """A span of the document: ``length`` characters from ``offset``."""

    offset: int
    length: int


@dataclass(frozen=True)
class Edit:
    """Replace ``length`` characters at ``offset`` with ``content``."""

    offset: int
    length: int
    content: str

    @property
    def end(self) -> int:
        return self.offset + self.length


def apply_edit(text: str, edit: Edit) -> str:
    return text[: edit.offset] + edit.content + text[edit.end :]


def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    """Apply ``edits`` to ``text`` and return the new text.

    Offsets refer to the original text. Edits are applied from the end of
    the document backwards so earlier offsets stay valid.

    Raises:
        EditOverlapError: If two edits cover the same characters
    """
    last_modified = len(text)
    for edit in reversed(sorted(edits, key=lambda e: (e.offset, e.length))):
        if edit.end > last_modified:
            raise EditOverlapError(
                f"Overlapping edit at offset {edit.offset} (length {edit.length})"
            )
        text = apply_edit(text, edit)
        last_modified = edit.offset
    return text


__all__ = ["Edit", "Range", "apply_edit", "apply_edits"]
