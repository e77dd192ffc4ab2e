"""
Type Classifier — Route a declared type string to its category.

Every field pushed onto the worklist carries one of these categories.
The set is closed; the drain loop handles each variant explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from rsv.catalog.catalog import Catalog
from rsv.catalog.models import ARRAY_SUFFIX


@dataclass(frozen=True)
class Scalar:
    kind: str


@dataclass(frozen=True)
class ScalarArray:
    kind: str


@dataclass(frozen=True)
class RecordRef:
    record_id: int


@dataclass(frozen=True)
class RecordRefArray:
    record_id: int


@dataclass(frozen=True)
class FieldUnknown:
    """The document carries a field its record does not declare."""


@dataclass(frozen=True)
class Unrecognized:
    type_name: str


@dataclass(frozen=True)
class TypeCheckPass:
    """Reserved: a field explicitly exempt from checking. Nothing emits it yet."""


Category = Union[
    Scalar,
    ScalarArray,
    RecordRef,
    RecordRefArray,
    FieldUnknown,
    Unrecognized,
    TypeCheckPass,
]

FIELD_UNKNOWN = FieldUnknown()


class TypeClassifier:
    """Classifies type strings against a catalog's precomputed name-sets."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def classify(self, type_name: str) -> Category:
        catalog = self._catalog

        if type_name in catalog.scalar_types:
            return Scalar(type_name)
        if type_name in catalog.scalar_array_types:
            return ScalarArray(type_name[: -len(ARRAY_SUFFIX)])
        if type_name in catalog.record_types:
            return RecordRef(catalog.index_of_full_name(type_name))
        if type_name in catalog.record_array_types:
            return RecordRefArray(catalog.index_of_full_name(type_name[: -len(ARRAY_SUFFIX)]))
        return Unrecognized(type_name)

    def classify_field(self, record_id: int, field_name: str) -> tuple[Category, Optional[str]]:
        """Category and rule for a document field under a record.

        Undeclared field names classify as FieldUnknown with no rule.
        """
        declared = self._catalog.field_type_and_rule(record_id, field_name)
        if declared is None:
            return FIELD_UNKNOWN, None
        type_name, rule = declared
        return self.classify(type_name), rule
