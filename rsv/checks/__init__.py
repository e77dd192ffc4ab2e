"""
Checks Module

Leaf checks used by the traversal: type classification, scalar and rule
checks, required-field presence.
"""

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
from rsv.checks.rules import CheckFailure, RuleKind, check_rule, parse_rule
from rsv.checks.scalars import check_scalar, check_type
from rsv.checks.required import check_required

__all__ = [
    # Classifier
    "Category",
    "FieldUnknown",
    "RecordRef",
    "RecordRefArray",
    "Scalar",
    "ScalarArray",
    "TypeCheckPass",
    "TypeClassifier",
    "Unrecognized",
    # Rules
    "CheckFailure",
    "RuleKind",
    "check_rule",
    "parse_rule",
    # Scalars
    "check_scalar",
    "check_type",
    # Required fields
    "check_required",
]
