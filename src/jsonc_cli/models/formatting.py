"""Formatting and modification settings passed to the JSONC engine."""

from __future__ import annotations

from typing import Callable, List, Literal, Optional

from pydantic import BaseModel, Field

EOL = Literal["\n", "\r\n"]


class FormattingOptions(BaseModel):
    """How formatted text is laid out."""

    tab_size: int = Field(default=2, ge=1)
    insert_spaces: bool = True
    eol: EOL = "\n"
    insert_final_newline: bool = False


class ModificationOptions(BaseModel):
    """Options for computing a modification edit.

    ``formatting_options`` shapes only the text that is injected; the rest of
    the document is left as it is. ``get_insertion_index`` receives the keys
    of the target object and returns where a new property goes (default:
    after the last one).
    """

    formatting_options: Optional[FormattingOptions] = None
    is_array_insertion: bool = False
    get_insertion_index: Optional[Callable[[List[str]], int]] = None


__all__ = ["EOL", "FormattingOptions", "ModificationOptions"]
