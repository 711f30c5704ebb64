"""Shared error types for puzzle input contracts."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import List

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced while checking a puzzle grid."""

    code: str
    msg: str
    path: str
    severity: str


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating a puzzle grid."""

    ok: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)


class GridValidationError(ValueError):
    """Raised when a grid cannot be handed to the solver at all."""

    def __init__(self, issues: List[ValidationIssue]) -> None:
        self.issues = list(issues)
        detail = "; ".join(f"{issue.code} at {issue.path}: {issue.msg}" for issue in self.issues)
        super().__init__(detail or "invalid grid")


class SchemaValidationError(RuntimeError):
    """Exception raised when a puzzle document fails schema validation."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct a warning-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_WARN)


__all__ = [
    "GridValidationError",
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "SchemaValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
