from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol, Union

from authforms.core import (
    Failure,
    FormState,
    Invalid,
    SubmissionOutcome,
    Success,
    ValidationResult,
    log_debug,
    log_info,
    log_warning,
)

from .schemas import LOGIN_FORM, REGISTER_FORM, FormDefinition
from .validator import validate

HOME_PATH = "/"
SUBMISSION_FAILED_MESSAGE = "Submission failed"


class SubmitsForms(Protocol):
    async def submit(
        self,
        endpoint_suffix: str,
        payload: Mapping[str, str],
        with_credentials: bool,
    ) -> SubmissionOutcome: ...


Navigate = Callable[[str], Any]


class FormPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    UNMOUNTED = "unmounted"


class FormController:
    """
    Drives one mounted form: holds its state, validates on submit and hands
    valid payloads to the submission client.

    Validation failures never reach the network; submission failures are
    reported as a single form-level message. A successful submission
    navigates to the home page and ends the life of this instance.
    """

    def __init__(
        self,
        form: FormDefinition,
        client: SubmitsForms,
        navigate: Navigate,
    ) -> None:
        self.form = form
        self.client = client
        self.navigate = navigate
        self.state = FormState.for_schema(form.schema)
        self._succeeded = False

    @property
    def phase(self) -> FormPhase:
        if not self.state.mounted:
            return FormPhase.UNMOUNTED
        if self._succeeded:
            return FormPhase.SUCCEEDED
        if self.state.submitting:
            return FormPhase.SUBMITTING
        return FormPhase.IDLE

    def set_value(self, field: str, value: str) -> None:
        """Update a field value; validation only happens on submit."""
        if field not in self.state.values:
            raise KeyError(f"Unknown field '{field}' for form '{self.form.name}'")
        self.state.values[field] = value
        # Stale error for the edited field only; submit revalidates everything.
        self.state.field_errors.pop(field, None)

    def unmount(self) -> None:
        """Destroy this form; late submission results are discarded."""
        self.state.mounted = False

    async def submit(self) -> Optional[Union[ValidationResult, SubmissionOutcome]]:
        """
        Run one submission attempt.

        Returns the Invalid result when validation rejected the values, the
        SubmissionOutcome once the request resolved, or None when the call
        was ignored (already submitting, succeeded or unmounted).
        """
        state = self.state
        if state.submitting or self._succeeded or not state.mounted:
            log_debug(f"[{self.form.name}] submit ignored ({self.phase.value})")
            return None

        state.submitting = True
        state.form_error = None

        result = validate(self.form.schema, state.values)
        if isinstance(result, Invalid):
            state.field_errors = dict(result.errors)
            state.form_error = None
            state.submitting = False
            log_debug(
                f"[{self.form.name}] rejected, invalid fields: "
                f"{', '.join(sorted(result.errors))}"
            )
            return result

        state.field_errors = {}
        try:
            outcome = await self.client.submit(
                self.form.endpoint,
                result.payload,
                self.form.with_credentials,
            )
        except Exception as e:
            # Any client error becomes a form error; the form stays usable.
            outcome = Failure(message=str(e) or SUBMISSION_FAILED_MESSAGE)

        if not state.mounted:
            log_debug(f"[{self.form.name}] outcome discarded, form unmounted")
            return outcome

        if isinstance(outcome, Success):
            state.submitting = False
            self._succeeded = True
            log_info(f"[{self.form.name}] submitted, navigating to {HOME_PATH}")
            self.navigate(HOME_PATH)
        elif isinstance(outcome, Failure):
            state.form_error = outcome.message
            state.submitting = False
            log_warning(f"[{self.form.name}] submission failed: {outcome.message}")

        return outcome


def login_form(client: SubmitsForms, navigate: Navigate) -> FormController:
    return FormController(LOGIN_FORM, client, navigate)


def register_form(client: SubmitsForms, navigate: Navigate) -> FormController:
    return FormController(REGISTER_FORM, client, navigate)
