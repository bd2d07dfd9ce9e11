import re
from typing import Dict, Mapping, Optional

from authforms.core import (
    FieldFormat,
    FieldSpec,
    FormSchema,
    Invalid,
    Valid,
    ValidationResult,
)

DEFAULT_REQUIRED_MESSAGE = "Required"
DEFAULT_MIN_LENGTH_MESSAGE = "Must be at least {min_length} characters"
DEFAULT_FORMAT_MESSAGES = {
    FieldFormat.EMAIL: "Invalid email address",
}

# local-part "@" domain, with at least one "." inside the domain
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@.]+(\.[^\s@.]+)+$")


def _normalise_values(values: Mapping[str, Optional[str]]) -> Dict[str, str]:
    return {k: ("" if v is None else str(v)) for k, v in (values or {}).items()}


def _matches_format(value: str, fmt: FieldFormat) -> bool:
    if fmt == FieldFormat.EMAIL:
        return bool(EMAIL_PATTERN.match(value))

    # Fallback: unsupported format never matches
    return False


def check_field(spec: FieldSpec, value: str) -> Optional[str]:
    """
    Run the checks of a single field and return the first error, if any.

    Order: required presence, minimum length, format.
    An empty value on a non-required field skips the remaining checks.
    """
    if not value.strip():
        if spec.required:
            return spec.required_message or DEFAULT_REQUIRED_MESSAGE
        return None

    if spec.min_length is not None and len(value) < spec.min_length:
        template = spec.min_length_message or DEFAULT_MIN_LENGTH_MESSAGE
        return template.format(min_length=spec.min_length)

    if spec.format is not None and not _matches_format(value, spec.format):
        return spec.format_message or DEFAULT_FORMAT_MESSAGES.get(
            spec.format, "Invalid format"
        )

    return None


def validate(schema: FormSchema, values: Mapping[str, Optional[str]]) -> ValidationResult:
    """
    Validate raw form values against a FormSchema.

    - every field is checked in declaration order; all failing fields are
      reported, one message each
    - cross-field rules only run once every field passed; the first failing
      rule is reported on its error_field and the others are skipped
    - on success the payload holds exactly the schema's fields
    """
    current = _normalise_values(values)
    errors: Dict[str, str] = {}

    for spec in schema.fields:
        message = check_field(spec, current.get(spec.name, ""))
        if message is not None:
            errors[spec.name] = message

    if errors:
        return Invalid(errors=errors)

    for rule in schema.cross_field_rules:
        if not rule.predicate(current):
            return Invalid(errors={rule.error_field: rule.error_message})

    payload = {name: current.get(name, "") for name in schema.field_names}
    return Valid(payload=payload)
