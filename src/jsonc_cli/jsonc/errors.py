"""Exceptions raised by the JSONC engine."""


class JSONCError(Exception):
    """Base class for JSONC engine errors."""


class ModificationError(JSONCError):
    """The requested change cannot be expressed as an edit of the document.

    Raised for deletes in an empty document, removals past the end of an
    array, and properties or indexes added to a parent of the wrong type.
    """


class EditOverlapError(JSONCError):
    """Two edits passed to ``apply_edits`` touch the same text."""


__all__ = ["EditOverlapError", "JSONCError", "ModificationError"]
