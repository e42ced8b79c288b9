"""Validation of timesheet lines prior to or alongside grouping."""

from src.validators.consistency_validator import (
    RepresentativeConflictError,
    find_representative_conflicts,
)
from src.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "RepresentativeConflictError",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "find_representative_conflicts",
]
