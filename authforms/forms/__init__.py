"""Public façade for the authforms.forms package.

This module exposes the login/register form definitions, the schema
validator and the form controller. Other packages should import form
behaviour from this façade instead of the internal submodules.
"""

from .controller import (
    HOME_PATH,
    FormController,
    FormPhase,
    login_form,
    register_form,
)
from .schemas import (
    FORMS,
    LOGIN_FORM,
    LOGIN_SCHEMA,
    REGISTER_FORM,
    REGISTER_SCHEMA,
    SESSIONS_ENDPOINT,
    USERS_ENDPOINT,
    FormDefinition,
    get_form,
)
from .validator import check_field, validate

__all__ = [
    "validate",
    "check_field",
    "FormDefinition",
    "LOGIN_SCHEMA",
    "REGISTER_SCHEMA",
    "LOGIN_FORM",
    "REGISTER_FORM",
    "FORMS",
    "get_form",
    "SESSIONS_ENDPOINT",
    "USERS_ENDPOINT",
    "FormController",
    "FormPhase",
    "HOME_PATH",
    "login_form",
    "register_form",
]
