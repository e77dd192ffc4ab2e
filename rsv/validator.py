"""
Validator — Caller-facing entry point.

    validator = SchemaValidator.from_path("schemas.yaml")
    validator.run({"name": "Bob"}, "demo.lead")        # -> bool
    validator.validate(Path("lead.json"), "demo.lead")  # -> ValidationReport

The document may be a DocumentSource, a path, or an in-memory JSON value.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from rsv.catalog.catalog import Catalog
from rsv.catalog.loader import load_catalog
from rsv.core.diagnostics import Diagnostic, DiagnosticCode, DiagnosticLevel, DiagnosticSink
from rsv.core.errors import DocumentError, StructuralError
from rsv.core.logging import RunLogger
from rsv.engine.source import as_source
from rsv.engine.traversal import TraversalEngine


class ValidationReport(BaseModel):
    """Outcome of one validation run."""

    run_id: str
    root: str
    source: str
    valid: bool
    examined: int = 0
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.ERROR]

    def has_code(self, code: DiagnosticCode) -> bool:
        return any(d.code == code for d in self.diagnostics)


class SchemaValidator:
    """
    Validates documents against a catalog.

    Holds no per-run state; one instance can be shared across threads.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self._engine = TraversalEngine(catalog)

    @classmethod
    def from_path(cls, schema_path: Path | str) -> "SchemaValidator":
        """Build a validator from a schema definition file."""
        return cls(load_catalog(schema_path))

    def validate(
        self,
        document: Any,
        root_name: str,
        sink: Optional[DiagnosticSink] = None,
    ) -> ValidationReport:
        """
        Validate a document against a root record.

        Args:
            document: DocumentSource, file path, or JSON value
            root_name: Full name of the root record
            sink: Collector for diagnostics (a fresh one if None)

        Returns:
            ValidationReport with the outcome and this run's diagnostics
        """
        source = as_source(document)
        sink = sink if sink is not None else DiagnosticSink()
        first = len(sink)
        run_id = str(uuid4())
        run_log = RunLogger(run_id, root_name)
        run_log.run_started()

        valid = False
        examined = 0
        try:
            root_id = self.catalog.index_of_full_name(root_name)
            if root_id is None:
                raise StructuralError(f"Root schema record can't be found: {root_name}")
            value = source.resolve()
            result = self._engine.run(root_id, value, sink, run_log)
            valid, examined = result.valid, result.examined
        except (StructuralError, DocumentError) as e:
            run_log.run_failed(e)
            sink.error(
                DiagnosticCode.STRUCTURAL_ERROR,
                str(e),
                record=getattr(e, "record", None),
            )
        finally:
            run_log.run_complete(valid, examined=examined, diagnostics=len(sink) - first)

        return ValidationReport(
            run_id=run_id,
            root=root_name,
            source=source.label,
            valid=valid,
            examined=examined,
            diagnostics=sink.diagnostics[first:],
        )

    def run(
        self,
        document: Any,
        root_name: str,
        sink: Optional[DiagnosticSink] = None,
    ) -> bool:
        """Validate and return only the outcome."""
        return self.validate(document, root_name, sink).valid


def validate_document(schema_path: Path | str, document: Any, root_name: str) -> ValidationReport:
    """
    Convenience function for one-off validations.

    Args:
        schema_path: Schema definition file
        document: DocumentSource, file path, or JSON value
        root_name: Full name of the root record

    Returns:
        ValidationReport
    """
    return SchemaValidator.from_path(schema_path).validate(document, root_name)
