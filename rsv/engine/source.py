"""
Document Source — Where the target document comes from.

A source is resolved to a JSON value once, before traversal starts.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from rsv.core.errors import DocumentError


@dataclass(frozen=True)
class DocumentSource:
    """An in-memory JSON value or a path to a JSON file."""

    value: Any = None
    path: Optional[Path] = None

    @classmethod
    def from_value(cls, value: Any) -> "DocumentSource":
        return cls(value=value)

    @classmethod
    def from_path(cls, path: Path | str) -> "DocumentSource":
        return cls(path=Path(path))

    @property
    def label(self) -> str:
        return str(self.path) if self.path is not None else "<memory>"

    def resolve(self) -> Any:
        """
        Produce the document's JSON value.

        Raises:
            DocumentError: If the file is missing or not valid JSON
        """
        if self.path is None:
            return self.value

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise DocumentError(f"Document not found: {self.path}") from e
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized int literals
            raise DocumentError(f"Cannot read document {self.path}: {e}") from e


def as_source(document: Any) -> DocumentSource:
    """
    Coerce a caller's document argument into a DocumentSource.

    Strings and path-like objects are file paths; anything else is an
    in-memory JSON value.
    """
    if isinstance(document, DocumentSource):
        return document
    if isinstance(document, (str, os.PathLike)):
        return DocumentSource.from_path(document)
    return DocumentSource.from_value(document)
