"""
Scalar Validator — Type-check a textual value against a scalar kind.

Values always arrive as text, even when the JSON value was a number or a
boolean. Type and rule checks are independent: a value can fail both, and
both failures are reported.

BigInteger is limited to the signed 64-bit range.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, Optional

from rsv.catalog.catalog import ScalarKind
from rsv.checks.rules import CheckFailure, check_rule
from rsv.core.diagnostics import DiagnosticCode


INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# date 'T' time, optional seconds/fraction, then Z or a numeric offset
_OFFSET_DATE_TIME_RE = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})"
    r"T(?P<time>[0-9]{2}:[0-9]{2}(?::[0-9]{2})?)(?:\.(?P<fraction>[0-9]{1,9}))?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2}(?::[0-9]{2})?)"
)


def _is_integer_in(value: str, low: int, high: int) -> bool:
    if not _INTEGER_RE.fullmatch(value):
        return False
    # int() refuses very long digit strings; those are out of range anyway
    digits = value.lstrip("+-").lstrip("0")
    if len(digits) > len(str(max(-low, high))):
        return False
    return low <= int(value) <= high


def is_int32(value: str) -> bool:
    return _is_integer_in(value, INT32_MIN, INT32_MAX)


def is_int64(value: str) -> bool:
    return _is_integer_in(value, INT64_MIN, INT64_MAX)


def is_double(value: str) -> bool:
    if "_" in value:
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


def is_boolean(value: str) -> bool:
    return value.lower() in ("true", "false")


def is_offset_date_time(value: str) -> bool:
    """Strict ISO-8601 date-time with a UTC offset, e.g. 2021-01-01T00:00:00+00:00."""
    match = _OFFSET_DATE_TIME_RE.fullmatch(value)
    if not match:
        return False

    offset = match.group("offset")
    if offset == "Z":
        offset = "+00:00"
    fraction = match.group("fraction")
    # datetime carries microseconds only
    fraction = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    normalized = f"{match.group('date')}T{match.group('time')}{fraction}{offset}"

    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return parsed.tzinfo is not None


_TYPE_CHECKS: dict[str, Callable[[str], bool]] = {
    ScalarKind.STRING: lambda value: True,
    ScalarKind.INTEGER: is_int32,
    ScalarKind.BIG_INTEGER: is_int64,
    ScalarKind.DOUBLE: is_double,
    ScalarKind.BOOLEAN: is_boolean,
    ScalarKind.OFFSET_DATE_TIME: is_offset_date_time,
}


def check_type(kind: str, value: str) -> Optional[CheckFailure]:
    """Parse a value as a scalar kind. Returns the failure, or None."""
    type_check = _TYPE_CHECKS[kind]
    if type_check(value):
        return None
    return CheckFailure(
        code=DiagnosticCode.TYPE_ERROR,
        message=f"Field type error: can't be {kind} - {value!r}",
        value=value,
    )


def check_scalar(kind: str, value: str, rule: Optional[str] = None) -> list[CheckFailure]:
    """
    Check a textual value against a scalar kind and an optional rule.

    Args:
        kind: One of ScalarKind.ALL
        value: The value as text
        rule: Tagged rule, or None

    Returns:
        Every failure found; empty when the value passes
    """
    failures = []
    type_failure = check_type(kind, value)
    if type_failure is not None:
        failures.append(type_failure)
    failures.extend(check_rule(value, rule))
    return failures
