"""
Traversal Engine — Iterative validation of a document against a catalog.

Two phases per run:

    load   -> push one WorkItem per field of the root instance(s),
              check required fields per instance
    drain  -> pop (LIFO) and route by category:
                Scalar          check the value
                ScalarArray     check every element
                RecordRef       unfold the referenced record's instance(s)
                RecordRefArray  unfold every element (two levels for array records)
                FieldUnknown    fail, continue
                Unrecognized    fail, continue

Record references are unfolded by pushing more work, never by recursion,
so native stack depth stays constant however deep the records nest.
Every WorkItem comes from a distinct node of the (finite) document, so the
worklist is bounded by document size.

Field-level failures are collected in the sink and the run goes on.
Structural failures raise StructuralError and end the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from rsv.catalog.catalog import Catalog
from rsv.catalog.models import RecordShape
from rsv.checks.classifier import (
    Category,
    FieldUnknown,
    RecordRef,
    RecordRefArray,
    Scalar,
    ScalarArray,
    TypeCheckPass,
    TypeClassifier,
    Unrecognized,
)
from rsv.checks.required import check_required
from rsv.checks.rules import CheckFailure
from rsv.checks.scalars import check_scalar
from rsv.core.diagnostics import DiagnosticCode, DiagnosticLevel, DiagnosticSink
from rsv.core.errors import StructuralError
from rsv.core.logging import RunLogger
from rsv.engine.jsonvalue import describe, elements, entries, is_array, is_object, scalar_text


@dataclass(frozen=True)
class WorkItem:
    """One pending field check."""

    category: Category
    name: str
    value: Any
    rule: Optional[str]
    record: str


@dataclass
class TraversalResult:
    valid: bool
    examined: int


class Traversal:
    """
    State of a single run: its worklist, counter and outcome.

    Created by TraversalEngine.run and discarded afterwards.
    """

    def __init__(
        self,
        catalog: Catalog,
        classifier: TypeClassifier,
        sink: DiagnosticSink,
        run_log: Optional[RunLogger] = None,
    ) -> None:
        self.catalog = catalog
        self.classifier = classifier
        self.sink = sink
        self.run_log = run_log
        self.worklist: list[WorkItem] = []
        self.valid = True
        self.examined = 0

    # -------------------------------------------------------------------------
    # Load
    # -------------------------------------------------------------------------

    def load(self, record_id: int, document: Any) -> None:
        """Push the root record's instance(s) onto the worklist."""
        self._unfold(record_id, document, field=None)

    def _unfold(self, record_id: int, value: Any, field: Optional[str]) -> None:
        """Push every instance a value holds under a record's shape."""
        shape = self._shape(record_id)

        if shape == RecordShape.OBJECT:
            self._push_instance(record_id, value, field)
            instances = 1
        else:
            self._require_array(record_id, value, field)
            instances = 0
            for element in elements(value):
                self._push_instance(record_id, element, field)
                instances += 1

        if self.run_log is not None:
            self.run_log.record_unfolded(self.catalog.full_name(record_id), instances)

    def _unfold_array(self, record_id: int, value: Any, field: str) -> None:
        """Unfold a RecordRefArray value: one instance (or one array of them) per element."""
        shape = self._shape(record_id)
        record = self.catalog.full_name(record_id)

        if not is_array(value):
            raise StructuralError(
                f"Field {field!r} must be an array of {record}, got {describe(value)}",
                record=record,
            )

        for element in elements(value):
            if shape == RecordShape.ARRAY:
                self._unfold(record_id, element, field)
            else:
                self._push_instance(record_id, element, field)

    def _push_instance(self, record_id: int, instance: Any, field: Optional[str]) -> None:
        record = self.catalog.full_name(record_id)

        if not is_object(instance):
            where = f"Field {field!r}" if field else "Document"
            raise StructuralError(
                f"{where} must hold {record} objects, got {describe(instance)}",
                record=record,
            )

        for name, value in entries(instance):
            category, rule = self.classifier.classify_field(record_id, name)
            self.worklist.append(WorkItem(category, name, value, rule, record))

        missing = check_required(self.catalog.required_field_names(record_id), instance.keys())
        if missing:
            self._fail(
                DiagnosticCode.MISSING_REQUIRED,
                f"Required field(s) not found: {missing}",
                field=field,
                record=record,
                missing=missing,
            )

    def _shape(self, record_id: int) -> RecordShape:
        shape = self.catalog.shape(record_id)
        if shape is None:
            record = self.catalog.record(record_id)
            raise StructuralError(
                f"Record type should be 'array' or 'object', got {record.type!r} "
                f"({record.full_name})",
                record=record.full_name,
            )
        return shape

    def _require_array(self, record_id: int, value: Any, field: Optional[str]) -> None:
        if is_array(value):
            return
        record = self.catalog.full_name(record_id)
        where = f"Field {field!r}" if field else "Document"
        raise StructuralError(
            f"{where} must be an array for array record {record}, got {describe(value)}",
            record=record,
        )

    # -------------------------------------------------------------------------
    # Drain
    # -------------------------------------------------------------------------

    def drain(self) -> None:
        """Pop and process work items until the worklist is empty."""
        while self.worklist:
            item = self.worklist.pop()
            self.examined += 1
            category = item.category

            if isinstance(category, Scalar):
                self._check_leaf(item, category.kind, item.value)

            elif isinstance(category, ScalarArray):
                if not is_array(item.value):
                    self._fail(
                        DiagnosticCode.NOT_AN_ARRAY,
                        f"Expected an array of {category.kind}, got {describe(item.value)}",
                        field=item.name,
                        record=item.record,
                    )
                    continue
                for element in elements(item.value):
                    self._check_leaf(item, category.kind, element)

            elif isinstance(category, RecordRef):
                self._unfold(category.record_id, item.value, item.name)

            elif isinstance(category, RecordRefArray):
                self._unfold_array(category.record_id, item.value, item.name)

            elif isinstance(category, FieldUnknown):
                self._fail(
                    DiagnosticCode.UNKNOWN_FIELD,
                    "Field name not declared in schema",
                    field=item.name,
                    record=item.record,
                )

            elif isinstance(category, Unrecognized):
                self._fail(
                    DiagnosticCode.UNRECOGNIZED_TYPE,
                    f"Unrecognized type provided: {category.type_name!r}",
                    field=item.name,
                    record=item.record,
                )

            elif isinstance(category, TypeCheckPass):
                self.sink.info(
                    DiagnosticCode.TYPE_CHECK_PASSED,
                    "Type checking passed",
                    field=item.name,
                    record=item.record,
                )

    def _check_leaf(self, item: WorkItem, kind: str, value: Any) -> None:
        try:
            text = scalar_text(value)
        except TypeError:
            self._fail(
                DiagnosticCode.TYPE_ERROR,
                f"Field type error: can't be {kind} - {describe(value)}",
                field=item.name,
                record=item.record,
            )
            return

        for failure in check_scalar(kind, text, item.rule):
            self._report(failure, item)

    # -------------------------------------------------------------------------
    # Outcome
    # -------------------------------------------------------------------------

    def _report(self, failure: CheckFailure, item: WorkItem) -> None:
        if failure.level == DiagnosticLevel.ERROR:
            self.valid = False
        self.sink.add(failure.level, failure.code, failure.message, field=item.name, record=item.record)

    def _fail(self, code: DiagnosticCode, message: str, **kwargs) -> None:
        self.valid = False
        self.sink.error(code, message, **kwargs)


class TraversalEngine:
    """
    Runs traversals against one catalog.

    Holds only immutable state (catalog, classifier), so a single engine
    can serve concurrent runs.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.classifier = TypeClassifier(catalog)

    def run(
        self,
        root_id: int,
        document: Any,
        sink: DiagnosticSink,
        run_log: Optional[RunLogger] = None,
    ) -> TraversalResult:
        """
        Validate a document against the record at root_id.

        Raises:
            StructuralError: If the document cannot be traversed
        """
        traversal = Traversal(self.catalog, self.classifier, sink, run_log)
        traversal.load(root_id, document)
        traversal.drain()
        return TraversalResult(valid=traversal.valid, examined=traversal.examined)
