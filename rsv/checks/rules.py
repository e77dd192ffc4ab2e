"""
Rules — Tagged constraints on a field's textual value.

A rule is a string with a tag prefix:
- $REGEX$<pattern>: the whole value must match the pattern
- $EQUAL$<literal>: the value must equal the literal
- $NOT_EQUAL$<literal>: the value must differ from the literal

Any other prefix is reported as unsupported and does not fail the value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rsv.catalog.models import PREFIX_EQUAL, PREFIX_NOT_EQUAL, PREFIX_REGEX
from rsv.core.diagnostics import DiagnosticCode, DiagnosticLevel


class RuleKind(str, Enum):
    """Kinds of tagged rules."""
    REGEX = "regex"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CheckFailure:
    """One failed (or skipped) check on a value."""

    code: DiagnosticCode
    message: str
    value: Optional[str] = None
    level: DiagnosticLevel = DiagnosticLevel.ERROR


def parse_rule(rule: str) -> tuple[RuleKind, str]:
    """Split a rule into its kind and operand."""
    for prefix, kind in (
        (PREFIX_NOT_EQUAL, RuleKind.NOT_EQUAL),
        (PREFIX_REGEX, RuleKind.REGEX),
        (PREFIX_EQUAL, RuleKind.EQUAL),
    ):
        if rule.startswith(prefix):
            return kind, rule[len(prefix):]
    return RuleKind.UNSUPPORTED, rule


def full_match(pattern: str, text: str) -> bool:
    """True if the pattern matches the whole text. Raises re.error on a bad pattern."""
    return re.fullmatch(pattern, text) is not None


def check_rule(value: str, rule: Optional[str]) -> list[CheckFailure]:
    """
    Apply a rule to a textual value.

    Args:
        value: The value as text
        rule: Tagged rule string, or None for no rule

    Returns:
        Failures (empty when the value satisfies the rule)
    """
    if rule is None:
        return []

    kind, operand = parse_rule(rule)

    if kind == RuleKind.REGEX:
        try:
            matched = full_match(operand, value)
        except re.error as e:
            return [CheckFailure(
                code=DiagnosticCode.RULE_ERROR,
                message=f"Invalid regex rule {operand!r}: {e}",
                value=value,
            )]
        if not matched:
            return [CheckFailure(
                code=DiagnosticCode.RULE_ERROR,
                message=f"Regex rule violated - value: {value!r} | regex: {operand!r}",
                value=value,
            )]

    elif kind == RuleKind.EQUAL:
        if value != operand:
            return [CheckFailure(
                code=DiagnosticCode.RULE_ERROR,
                message=f"Equal rule violated - value: {value!r} | should be: {operand!r}",
                value=value,
            )]

    elif kind == RuleKind.NOT_EQUAL:
        if value == operand:
            return [CheckFailure(
                code=DiagnosticCode.RULE_ERROR,
                message=f"NotEqual rule violated - value: {value!r} | should not be: {operand!r}",
                value=value,
            )]

    else:
        return [CheckFailure(
            code=DiagnosticCode.UNSUPPORTED_RULE,
            message=f"Unsupported rule skipped: {rule!r} (only Regex/Equal/NotEqual are supported)",
            value=value,
            level=DiagnosticLevel.WARNING,
        )]

    return []
