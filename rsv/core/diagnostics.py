"""
Diagnostics — Per-run collector for validation findings.

A DiagnosticSink is created for each validation run and passed into the
traversal. Every finding is kept as a Diagnostic and mirrored to the
structured log, so callers get both a report and a log trail.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from rsv.core.logging import ChannelLogger, LogChannel, get_logger


class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticCode(str, Enum):
    """Stable codes for everything a run can report."""

    STRUCTURAL_ERROR = "STRUCTURAL_ERROR"
    TYPE_ERROR = "TYPE_ERROR"
    RULE_ERROR = "RULE_ERROR"
    UNSUPPORTED_RULE = "UNSUPPORTED_RULE"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    UNRECOGNIZED_TYPE = "UNRECOGNIZED_TYPE"
    MISSING_REQUIRED = "MISSING_REQUIRED"
    NOT_AN_ARRAY = "NOT_AN_ARRAY"
    TYPE_CHECK_PASSED = "TYPE_CHECK_PASSED"


class Diagnostic(BaseModel):
    """A single finding produced during a run."""

    level: DiagnosticLevel
    code: DiagnosticCode
    message: str
    field: Optional[str] = None
    record: Optional[str] = None
    missing: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        where = f" [{self.record}]" if self.record else ""
        name = f" {self.field}:" if self.field else ""
        return f"{self.level.value.upper()} {self.code.value}{where}{name} {self.message}"


class DiagnosticSink:
    """
    Collects diagnostics for one run.

    Errors flip the run outcome; warnings and info entries do not.
    """

    def __init__(self, logger: Optional[ChannelLogger] = None) -> None:
        self._log = logger or get_logger(LogChannel.CHECK)
        self.diagnostics: list[Diagnostic] = []

    def add(
        self,
        level: DiagnosticLevel,
        code: DiagnosticCode,
        message: str,
        field: Optional[str] = None,
        record: Optional[str] = None,
        missing: Optional[list[str]] = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            level=level,
            code=code,
            message=message,
            field=field,
            record=record,
            missing=missing or [],
        )
        self.diagnostics.append(diagnostic)

        event = code.value.lower()
        context = {"message": message, "field": field, "record": record}
        if missing:
            context["missing"] = missing
        if level == DiagnosticLevel.ERROR:
            self._log.error(event, **context)
        elif level == DiagnosticLevel.WARNING:
            self._log.warning(event, **context)
        else:
            self._log.verbose(event, **context)
        return diagnostic

    def error(self, code: DiagnosticCode, message: str, **kwargs) -> Diagnostic:
        return self.add(DiagnosticLevel.ERROR, code, message, **kwargs)

    def warning(self, code: DiagnosticCode, message: str, **kwargs) -> Diagnostic:
        return self.add(DiagnosticLevel.WARNING, code, message, **kwargs)

    def info(self, code: DiagnosticCode, message: str, **kwargs) -> Diagnostic:
        return self.add(DiagnosticLevel.INFO, code, message, **kwargs)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.ERROR]

    @property
    def has_errors(self) -> bool:
        return any(d.level == DiagnosticLevel.ERROR for d in self.diagnostics)

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.code == code]

    def __len__(self) -> int:
        return len(self.diagnostics)
