"""
Errors — Exception hierarchy for fatal conditions.

Only structural problems raise. Per-field problems are collected as
diagnostics and never raised.
"""

from typing import Optional


class RSVError(Exception):
    """Base class for all RSV errors."""


class CatalogError(RSVError):
    """A schema definition is malformed, duplicated or unreadable."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        super().__init__(f"{message} ({source})" if source else message)


class StructuralError(RSVError):
    """The document cannot be traversed against the catalog at all.

    Raised when the root record is unknown, when a record shape is neither
    ``object`` nor ``array``, or when a value's shape does not match the
    shape its record declares. Aborts the whole run.
    """

    def __init__(self, message: str, record: Optional[str] = None) -> None:
        self.record = record
        super().__init__(message)


class DocumentError(RSVError):
    """The target document could not be read or parsed."""
