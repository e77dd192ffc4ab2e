"""
Catalog — Immutable, indexed view over schema records.

Records are addressed by position (record id). The full-name index, the
per-record field tables and the four derived name-sets are built once here
and never mutated, so one catalog can back any number of concurrent runs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from rsv.catalog.models import ARRAY_SUFFIX, RecordShape, SchemaRecord
from rsv.core.errors import CatalogError
from rsv.core.logging import LogChannel, get_logger


class ScalarKind:
    """Type names of the fixed scalar kinds, as written in definitions."""

    STRING = "String"
    INTEGER = "Integer"
    BIG_INTEGER = "BigInteger"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    OFFSET_DATE_TIME = "OffsetDateTime"

    ALL = (STRING, INTEGER, BIG_INTEGER, DOUBLE, BOOLEAN, OFFSET_DATE_TIME)


class Catalog:
    """
    Ordered collection of schema records.

    Exposes the lookups the traversal needs:
    shape, full_name, field_type_and_rule, required_field_names,
    index_of_full_name.
    """

    def __init__(self, records: Iterable[SchemaRecord]) -> None:
        self._records: tuple[SchemaRecord, ...] = tuple(records)

        index: dict[str, int] = {}
        for record_id, record in enumerate(self._records):
            if record.full_name in index:
                raise CatalogError(f"Duplicate record full name: {record.full_name}")
            index[record.full_name] = record_id
        self._index = MappingProxyType(index)

        self._field_tables = tuple(
            MappingProxyType({spec.name: (spec.type, spec.rule) for spec in record.fields})
            for record in self._records
        )

        self.scalar_types: frozenset[str] = frozenset(ScalarKind.ALL)
        self.scalar_array_types: frozenset[str] = frozenset(
            kind + ARRAY_SUFFIX for kind in ScalarKind.ALL
        )
        self.record_types: frozenset[str] = frozenset(index)
        self.record_array_types: frozenset[str] = frozenset(
            name + ARRAY_SUFFIX for name in index
        )

        get_logger(LogChannel.CATALOG).verbose(
            "catalog_built",
            records=len(self._records),
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def record(self, record_id: int) -> SchemaRecord:
        return self._records[record_id]

    def shape(self, record_id: int) -> Optional[RecordShape]:
        """Declared shape of a record, None when it is neither object nor array."""
        return self._records[record_id].shape

    def full_name(self, record_id: int) -> str:
        return self._records[record_id].full_name

    def field_type_and_rule(
        self, record_id: int, field_name: str
    ) -> Optional[tuple[str, Optional[str]]]:
        return self._field_tables[record_id].get(field_name)

    def required_field_names(self, record_id: int) -> tuple[str, ...]:
        return tuple(self._records[record_id].required)

    def index_of_full_name(self, name: str) -> Optional[int]:
        return self._index.get(name)

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SchemaRecord]:
        return iter(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def names(self) -> list[str]:
        """Full names in definition order."""
        return [record.full_name for record in self._records]
