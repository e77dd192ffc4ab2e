"""
Unit tests for the required-field checker.
"""

from rsv.checks.required import check_required, is_satisfied


class TestRequiredFields:
    """Tests for literal and pattern-tagged required names."""

    def test_all_present(self):
        assert check_required(["name", "age"], {"name", "age", "extra"}) == []

    def test_literal_missing(self):
        assert check_required(["name"], {"age"}) == ["name"]

    def test_collects_every_missing_name(self):
        missing = check_required(["a", "b", "c"], {"b"})

        assert missing == ["a", "c"]

    def test_pattern_satisfied_by_any_matching_name(self):
        assert check_required(["$REGEX$^addr_[0-9]+$"], {"addr_1", "name"}) == []

    def test_pattern_requires_full_match(self):
        missing = check_required(["$REGEX$addr"], {"home_addr_1"})

        assert missing == ["$REGEX$addr"]

    def test_no_requirements(self):
        assert check_required([], set()) == []

    def test_is_satisfied_literal_is_exact(self):
        assert not is_satisfied("Name", {"name"})
