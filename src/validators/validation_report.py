"""Collected findings from checks over timesheet lines."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single finding about one timesheet line.

    Attributes:
        severity: How serious the finding is
        field: Name of the line field the finding is about
        message: Human-readable description
        value: The offending value
        context: Optional location information (rate code, day, index)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Accumulates validation issues.

    Warnings and info messages never make a report invalid; only errors do.

    Example:
        >>> report = ValidationReport()
        >>> report.add_warning("rate", "Rate differs from first line", "31.00")
        >>> report.is_valid()
        True
        >>> report.summary()
        '1 warning(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def __len__(self) -> int:
        return len(self.issues)

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return self.error_count == 0

    def add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Append an issue of the given severity.

        Args:
            severity: Severity of the issue
            field: The field name the issue is about
            message: Human-readable description
            value: The value that caused the issue
            context: Optional context information
        """
        self.issues.append(
            ValidationIssue(
                severity=severity,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_error(self, field, message, value, context=None) -> None:
        self.add(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(self, field, message, value, context=None) -> None:
        self.add(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(self, field, message, value, context=None) -> None:
        self.add(ValidationSeverity.INFO, field, message, value, context)

    def filter(self, min_severity: ValidationSeverity) -> List[ValidationIssue]:
        """Return issues at or above ``min_severity``, in insertion order."""
        return [issue for issue in self.issues if issue.severity >= min_severity]

    def merge(self, other: "ValidationReport") -> None:
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Get a one-line summary with the count per severity.

        Returns:
            Summary such as "1 error(s), 2 warning(s)" or "No issues found"
        """
        parts = []
        if self.error_count:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count:
            parts.append(f"{self.info_count} info message(s)")

        return ", ".join(parts) if parts else "No issues found"

    def format(self) -> str:
        """Format the report for display, highest severity first."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]
        for severity in sorted(ValidationSeverity, reverse=True):
            matching = [i for i in self.issues if i.severity == severity]
            if matching:
                lines.append(f"\n{severity.name}S:")
                lines.extend(f"  - {issue}" for issue in matching)

        return "\n".join(lines)
