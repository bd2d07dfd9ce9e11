from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldKind(str, Enum):
    EMAIL = "email"
    TEXT = "text"
    PASSWORD = "password"


class FieldFormat(str, Enum):
    EMAIL = "email"


class CrossFieldOperator(str, Enum):
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"


class FieldSpec(BaseModel):
    """
    Declarative description of a single form field.

    - required   : value must be non-empty once surrounding whitespace is stripped
    - min_length : minimum number of characters of the raw value
    - format     : syntactic shape the value must have (e.g. email)

    The *_message attributes override the default error text of each check.
    label / placeholder are presentation hints only.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = True
    min_length: Optional[int] = Field(default=None, ge=0)
    format: Optional[FieldFormat] = None

    required_message: Optional[str] = None
    min_length_message: Optional[str] = None
    format_message: Optional[str] = None

    label: Optional[str] = None
    placeholder: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.name


class CrossFieldRule(BaseModel):
    """A constraint spanning several fields, reported on a single field."""

    model_config = ConfigDict(frozen=True)

    fields: List[str] = Field(min_length=2)
    operator: CrossFieldOperator = CrossFieldOperator.EQUAL
    error_field: str
    error_message: str

    @model_validator(mode="after")
    def _error_field_is_referenced(self) -> "CrossFieldRule":
        if self.error_field not in self.fields:
            raise ValueError(
                f"error_field '{self.error_field}' is not one of {self.fields}"
            )
        return self

    def predicate(self, values: Mapping[str, str]) -> bool:
        """Return True when the rule holds for the given values."""
        observed = [values.get(name, "") for name in self.fields]

        if self.operator == CrossFieldOperator.EQUAL:
            return all(v == observed[0] for v in observed[1:])
        if self.operator == CrossFieldOperator.NOT_EQUAL:
            return len(set(observed)) == len(observed)

        # Unknown operator: never satisfied
        return False


class FormSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    fields: List[FieldSpec]
    cross_field_rules: List[CrossFieldRule] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_field_references(self) -> "FormSchema":
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field names in schema '{self.name}'")

        known = set(names)
        for rule in self.cross_field_rules:
            missing = [n for n in rule.fields if n not in known]
            if missing:
                raise ValueError(
                    f"cross-field rule references unknown fields: {missing}"
                )
        return self

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)


@dataclass(frozen=True)
class Valid:
    payload: Dict[str, str]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    errors: Dict[str, str]

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class Success:
    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str

    @property
    def ok(self) -> bool:
        return False


SubmissionOutcome = Union[Success, Failure]


@dataclass
class FormState:
    """
    Mutable state of one mounted form.

    - values       : current raw input per field
    - field_errors : per-field error text from the last rejected submission
    - form_error   : form-level error text from the last failed submission
    - submitting   : True while a submission is in flight (re-entrancy guard)
    - mounted      : False once the owning form has been destroyed
    """

    values: Dict[str, str] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)
    form_error: Optional[str] = None
    submitting: bool = False
    mounted: bool = True

    @classmethod
    def for_schema(cls, schema: FormSchema) -> "FormState":
        return cls(values={name: "" for name in schema.field_names})
