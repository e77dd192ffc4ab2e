"""
Required-Field Checker — Verify an instance carries its mandatory fields.
"""

from __future__ import annotations

import re
from typing import Collection, Iterable

from rsv.catalog.models import PREFIX_REGEX


def is_satisfied(required_name: str, actual_names: Collection[str]) -> bool:
    """
    Check one required name against the names an instance actually has.

    A literal name needs an exact match. A $REGEX$-tagged name needs at
    least one actual name that fully matches the pattern.
    """
    if required_name in actual_names:
        return True
    if required_name.startswith(PREFIX_REGEX):
        pattern = re.compile(required_name[len(PREFIX_REGEX):])
        return any(pattern.fullmatch(name) for name in actual_names)
    return False


def check_required(required_names: Iterable[str], actual_names: Iterable[str]) -> list[str]:
    """
    Find every required name an instance is missing.

    Does not stop at the first miss.

    Returns:
        Unsatisfied required names, in declaration order (empty = pass)
    """
    actual = set(actual_names)
    return [name for name in required_names if not is_satisfied(name, actual)]
