from authforms.core import Invalid, Valid
from authforms.forms import LOGIN_SCHEMA, REGISTER_SCHEMA, validate


def _register_values(**overrides) -> dict:
    values = {
        "email": "bob.smith@email.com",
        "name": "Bob Smith",
        "password": "secret1",
        "passwordConfirmation": "secret1",
    }
    values.update(overrides)
    return values


def test_login_valid_payload_contains_exactly_schema_fields() -> None:
    result = validate(
        LOGIN_SCHEMA,
        {"email": "bob@x.com", "password": "hunter2", "remember": "yes"},
    )

    assert isinstance(result, Valid)
    assert result.payload == {"email": "bob@x.com", "password": "hunter2"}


def test_login_missing_fields_use_generic_required_message() -> None:
    result = validate(LOGIN_SCHEMA, {"email": "   "})

    assert isinstance(result, Invalid)
    assert result.errors == {"email": "Required", "password": "Required"}


def test_login_does_not_check_email_shape() -> None:
    result = validate(LOGIN_SCHEMA, {"email": "bob", "password": "x"})

    assert isinstance(result, Valid)


def test_register_valid_values() -> None:
    result = validate(REGISTER_SCHEMA, _register_values())

    assert isinstance(result, Valid)
    assert set(result.payload) == {"email", "name", "password", "passwordConfirmation"}


def test_register_passwords_must_match() -> None:
    result = validate(
        REGISTER_SCHEMA,
        _register_values(password="secret1", passwordConfirmation="secret2"),
    )

    assert isinstance(result, Invalid)
    assert result.errors == {"passwordConfirmation": "Passwords must match"}


def test_register_short_password_reports_minimum_regardless_of_confirmation() -> None:
    for confirmation in ("abc", "abcdef", ""):
        result = validate(
            REGISTER_SCHEMA,
            _register_values(password="abc", passwordConfirmation=confirmation),
        )

        assert isinstance(result, Invalid)
        assert result.errors["password"] == "Password must be at least 6 characters"
        assert result.errors.get("passwordConfirmation") != "Passwords must match"


def test_register_aggregates_field_errors_with_custom_messages() -> None:
    result = validate(REGISTER_SCHEMA, {"email": "not-an-email", "password": "abc"})

    assert isinstance(result, Invalid)
    assert result.errors == {
        "email": "Not a valid email address",
        "name": "Name is required",
        "password": "Password must be at least 6 characters",
        "passwordConfirmation": "Password confirmation is required",
    }


def test_register_email_needs_dot_in_domain() -> None:
    result = validate(REGISTER_SCHEMA, _register_values(email="bob@localhost"))

    assert isinstance(result, Invalid)
    assert result.errors == {"email": "Not a valid email address"}


def test_first_failing_rule_wins_per_field() -> None:
    # Empty value: required fires, min length and format are not reported.
    result = validate(REGISTER_SCHEMA, _register_values(email="", password=""))

    assert isinstance(result, Invalid)
    assert result.errors["email"] == "Email is required"
    assert result.errors["password"] == "Password is required"


def test_none_values_are_treated_as_empty() -> None:
    result = validate(LOGIN_SCHEMA, {"email": None, "password": "pw"})

    assert isinstance(result, Invalid)
    assert result.errors == {"email": "Required"}


def test_validation_is_idempotent() -> None:
    values = _register_values(passwordConfirmation="secret2")

    first = validate(REGISTER_SCHEMA, values)
    second = validate(REGISTER_SCHEMA, values)

    assert first == second
    assert values["passwordConfirmation"] == "secret2"


def test_register_email_rejects_whitespace_and_second_at() -> None:
    for email in ("a b@x.com", "a@b@c.com", "bob@x .com", "@x.com", "bob@.com"):
        result = validate(REGISTER_SCHEMA, _register_values(email=email))

        assert isinstance(result, Invalid), email
        assert result.errors == {"email": "Not a valid email address"}
