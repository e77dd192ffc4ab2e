"""
RSV — Record Schema Validator

Validates JSON documents against a catalog of named, cross-referencing
record schemas. Nested record references are unfolded iteratively, so
schema depth never grows the call stack.
"""

__version__ = "0.1.0"

from rsv.catalog import Catalog, SchemaRecord, load_catalog
from rsv.core.diagnostics import Diagnostic, DiagnosticCode, DiagnosticSink
from rsv.core.errors import CatalogError, DocumentError, RSVError, StructuralError
from rsv.engine.source import DocumentSource
from rsv.validator import SchemaValidator, ValidationReport, validate_document

__all__ = [
    "__version__",
    "Catalog",
    "SchemaRecord",
    "load_catalog",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticSink",
    "CatalogError",
    "DocumentError",
    "RSVError",
    "StructuralError",
    "DocumentSource",
    "SchemaValidator",
    "ValidationReport",
    "validate_document",
]
