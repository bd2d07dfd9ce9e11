from dataclasses import dataclass

from authforms.core import (
    CrossFieldOperator,
    CrossFieldRule,
    FieldFormat,
    FieldKind,
    FieldSpec,
    FormSchema,
)

SESSIONS_ENDPOINT = "/api/sessions"
USERS_ENDPOINT = "/api/users"

PASSWORD_MIN_LENGTH = 6
PASSWORD_LENGTH_MESSAGE = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"


@dataclass(frozen=True)
class FormDefinition:
    """
    Everything a form needs besides its state.

    - schema           : validation rules
    - endpoint         : path appended to the API base endpoint
    - with_credentials : whether the request must carry/receive cookies
    """

    schema: FormSchema
    endpoint: str
    with_credentials: bool = False

    @property
    def name(self) -> str:
        return self.schema.name


LOGIN_SCHEMA = FormSchema(
    name="login",
    fields=[
        FieldSpec(
            name="email",
            kind=FieldKind.EMAIL,
            label="Email",
            placeholder="bob.smith@email.com",
        ),
        FieldSpec(
            name="password",
            kind=FieldKind.PASSWORD,
            label="Password",
            placeholder="********",
        ),
    ],
)

REGISTER_SCHEMA = FormSchema(
    name="register",
    fields=[
        FieldSpec(
            name="email",
            kind=FieldKind.EMAIL,
            format=FieldFormat.EMAIL,
            required_message="Email is required",
            format_message="Not a valid email address",
            label="Email",
            placeholder="bob.smith@email.com",
        ),
        FieldSpec(
            name="name",
            kind=FieldKind.TEXT,
            required_message="Name is required",
            label="Name",
            placeholder="Bob Smith",
        ),
        FieldSpec(
            name="password",
            kind=FieldKind.PASSWORD,
            min_length=PASSWORD_MIN_LENGTH,
            required_message="Password is required",
            min_length_message=PASSWORD_LENGTH_MESSAGE,
            label="Password",
            placeholder="********",
        ),
        FieldSpec(
            name="passwordConfirmation",
            kind=FieldKind.PASSWORD,
            min_length=PASSWORD_MIN_LENGTH,
            required_message="Password confirmation is required",
            min_length_message=PASSWORD_LENGTH_MESSAGE,
            label="Confirm Password",
            placeholder="********",
        ),
    ],
    cross_field_rules=[
        CrossFieldRule(
            fields=["password", "passwordConfirmation"],
            operator=CrossFieldOperator.EQUAL,
            error_field="passwordConfirmation",
            error_message="Passwords must match",
        ),
    ],
)

LOGIN_FORM = FormDefinition(
    schema=LOGIN_SCHEMA,
    endpoint=SESSIONS_ENDPOINT,
    with_credentials=True,
)

REGISTER_FORM = FormDefinition(
    schema=REGISTER_SCHEMA,
    endpoint=USERS_ENDPOINT,
    with_credentials=False,
)

FORMS = {
    LOGIN_FORM.name: LOGIN_FORM,
    REGISTER_FORM.name: REGISTER_FORM,
}


def get_form(name: str) -> FormDefinition:
    try:
        return FORMS[name]
    except KeyError:
        raise KeyError(f"Unknown form '{name}'") from None
