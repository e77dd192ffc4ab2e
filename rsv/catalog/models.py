"""
Catalog Models — Pydantic models for schema definitions.

A schema definition file is a list of records. Each record is either one
object instance or a homogeneous array of instances, declares a type (and
optional rule) per field, and lists the field names an instance must carry.

Example (YAML):

    - namespace: demo
      name: lead
      type: object
      fields:
        - {name: name, type: String}
        - {name: age, type: Integer}
        - {name: tags, type: "String[]"}
      required: [name]
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Rule and required-name tags
PREFIX_REGEX = "$REGEX$"
PREFIX_EQUAL = "$EQUAL$"
PREFIX_NOT_EQUAL = "$NOT_EQUAL$"

ARRAY_SUFFIX = "[]"


def _compile_tagged(value: str) -> None:
    """Reject a $REGEX$-tagged string whose pattern does not compile."""
    if not value.startswith(PREFIX_REGEX):
        return
    try:
        re.compile(value[len(PREFIX_REGEX):])
    except re.error as e:
        raise ValueError(f"invalid regex in {value!r}: {e}") from e


class RecordShape(str, Enum):
    """How many instances a record describes."""

    OBJECT = "object"
    ARRAY = "array"


class FieldSpec(BaseModel):
    """Declared type and optional rule of one field."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name as it appears in documents")
    type: str = Field(..., description="Scalar kind, record full name, either with []")
    rule: Optional[str] = Field(None, description="Tagged constraint, e.g. $REGEX$^[a-z]+$")

    @field_validator("rule")
    @classmethod
    def _blank_rule_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        _compile_tagged(value)
        return value


class SchemaRecord(BaseModel):
    """A named record definition."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field("", description="Dotted namespace, e.g. schema.omp")
    name: str = Field(..., description="Record name within its namespace")
    # Kept as a plain string so an unsupported shape surfaces at traversal time
    type: str = Field(..., description="Record shape: object or array")
    doc: Optional[str] = Field(None, description="Free-form description")
    fields: list[FieldSpec] = Field(default_factory=list)
    required: list[str] = Field(default_factory=list, description="Literal or $REGEX$ names")

    @field_validator("required")
    @classmethod
    def _patterns_compile(cls, value: list[str]) -> list[str]:
        for name in value:
            _compile_tagged(name)
        return value

    @property
    def full_name(self) -> str:
        """Globally unique path used to reference this record."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def shape(self) -> Optional[RecordShape]:
        """Declared shape, or None when the type is not a known shape."""
        try:
            return RecordShape(self.type.lower())
        except ValueError:
            return None
