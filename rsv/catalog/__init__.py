"""
Catalog Module

Schema record models, the immutable catalog and its loader.
"""

from rsv.catalog.models import (
    FieldSpec,
    RecordShape,
    SchemaRecord,
)
from rsv.catalog.catalog import Catalog, ScalarKind
from rsv.catalog.loader import load_catalog, parse_catalog

__all__ = [
    # Models
    "FieldSpec",
    "RecordShape",
    "SchemaRecord",
    # Catalog
    "Catalog",
    "ScalarKind",
    # Loader
    "load_catalog",
    "parse_catalog",
]
