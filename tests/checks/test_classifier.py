"""
Unit tests for the type classifier.
"""

from rsv.checks.classifier import (
    FieldUnknown,
    RecordRef,
    RecordRefArray,
    Scalar,
    ScalarArray,
    TypeClassifier,
    Unrecognized,
)


class TestClassify:
    """Tests for routing declared type strings."""

    def test_scalar_kinds(self, crm_catalog):
        classifier = TypeClassifier(crm_catalog)

        for kind in ("String", "Integer", "BigInteger", "Double", "Boolean", "OffsetDateTime"):
            assert classifier.classify(kind) == Scalar(kind)

    def test_scalar_arrays(self, crm_catalog):
        classifier = TypeClassifier(crm_catalog)

        assert classifier.classify("Integer[]") == ScalarArray("Integer")

    def test_record_reference_resolves_to_index(self, crm_catalog):
        classifier = TypeClassifier(crm_catalog)

        assert classifier.classify("schema.omp.user") == RecordRef(1)
        assert classifier.classify("schema.omp.events[]") == RecordRefArray(3)

    def test_anything_else_is_unrecognized(self, crm_catalog):
        classifier = TypeClassifier(crm_catalog)

        assert classifier.classify("string") == Unrecognized("string")
        assert classifier.classify("schema.omp") == Unrecognized("schema.omp")
        assert classifier.classify("Integer[][]") == Unrecognized("Integer[][]")
        assert classifier.classify("TypeCheckingPass") == Unrecognized("TypeCheckingPass")


class TestClassifyField:
    """Tests for field lookup through a record."""

    def test_declared_field_carries_rule(self, crm_catalog):
        classifier = TypeClassifier(crm_catalog)

        category, rule = classifier.classify_field(0, "status")

        assert category == Scalar("String")
        assert rule == "$NOT_EQUAL$deleted"

    def test_undeclared_field_is_unknown(self, crm_catalog):
        classifier = TypeClassifier(crm_catalog)

        category, rule = classifier.classify_field(0, "nickname")

        assert category == FieldUnknown()
        assert rule is None
