"""Public façade for the authforms.core package.

This module exposes logging helpers and the form data model (field specs,
schemas, validation results, submission outcomes and form state) that are
safe to import from other packages. Callers should import these
cross-cutting concerns from this façade instead of the internal submodules.
"""

from .logging_config import configure_logging, parse_log_level
from .logging_utils import (
    log_debug,
    log_error,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    CrossFieldOperator,
    CrossFieldRule,
    Failure,
    FieldFormat,
    FieldKind,
    FieldSpec,
    FormSchema,
    FormState,
    Invalid,
    SubmissionOutcome,
    Success,
    Valid,
    ValidationResult,
)

__all__ = [
    "configure_logging",
    "parse_log_level",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "log_debug",
    "FieldKind",
    "FieldFormat",
    "FieldSpec",
    "CrossFieldOperator",
    "CrossFieldRule",
    "FormSchema",
    "FormState",
    "Valid",
    "Invalid",
    "ValidationResult",
    "Success",
    "Failure",
    "SubmissionOutcome",
]
