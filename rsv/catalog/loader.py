"""
Catalog Loader — Load schema definitions from JSON or YAML files.

Accepts either a top-level list of records or a mapping with a
``records`` key (so a definition file can carry its own metadata).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from rsv.catalog.catalog import Catalog
from rsv.catalog.models import SchemaRecord
from rsv.core.errors import CatalogError
from rsv.core.logging import LogChannel, get_logger


YAML_SUFFIXES = {".yaml", ".yml"}

log = get_logger(LogChannel.CATALOG)


def load_catalog(path: Path | str) -> Catalog:
    """
    Load a catalog from a schema definition file.

    Args:
        path: Path to a .json, .yaml or .yml definition file

    Returns:
        Catalog built from the file's records

    Raises:
        CatalogError: If the file is missing, unparsable or invalid
    """
    path = Path(path)

    if not path.exists():
        raise CatalogError("Schema definition file not found", source=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise CatalogError(f"Cannot read schema definitions: {e}", source=str(path)) from e

    catalog = parse_catalog(data, source=str(path))
    log.info("catalog_loaded", path=str(path), records=len(catalog))
    return catalog


def parse_catalog(data: Any, source: str = "<memory>") -> Catalog:
    """Build a catalog from already-parsed definition data."""
    if isinstance(data, dict):
        data = data.get("records")
    if not isinstance(data, list):
        raise CatalogError("Schema definitions must be a list of records", source=source)

    records = []
    for position, record_data in enumerate(data):
        try:
            records.append(SchemaRecord.model_validate(record_data))
        except ValidationError as e:
            raise CatalogError(f"Invalid record at position {position}: {e}", source=source) from e

    return Catalog(records)
