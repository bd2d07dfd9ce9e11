import argparse
import asyncio
import getpass
import logging
from typing import Callable, Iterable, List, Mapping, Optional

from authforms import config
from authforms.api import SubmissionClient
from authforms.core import (
    FieldKind,
    FieldSpec,
    FormSchema,
    Invalid,
    configure_logging,
    log_error,
    log_section,
    log_success,
    parse_log_level,
)
from authforms.forms import FORMS, FormController, get_form

Prompt = Callable[[str], str]


def prompt_text(spec: FieldSpec) -> str:
    hint = f" ({spec.placeholder})" if spec.placeholder else ""
    return f"?  {spec.display_label}{hint}: "


def fields_to_reprompt(schema: FormSchema, errors: Mapping[str, str]) -> List[FieldSpec]:
    """Failing fields, plus every field of a cross-field rule that failed."""
    names = set(errors)
    for rule in schema.cross_field_rules:
        if errors.get(rule.error_field) == rule.error_message:
            names.update(rule.fields)
    return [f for f in schema.fields if f.name in names]


def fill_fields(
    controller: FormController,
    fields: Iterable[FieldSpec],
    ask: Prompt,
    ask_secret: Prompt,
) -> None:
    for spec in fields:
        error = controller.state.field_errors.get(spec.name)
        if error:
            print(f"   {spec.display_label}: {error}")
        reader = ask_secret if spec.kind == FieldKind.PASSWORD else ask
        controller.set_value(spec.name, reader(prompt_text(spec)))


def run_form(
    controller: FormController,
    ask: Prompt = input,
    ask_secret: Prompt = getpass.getpass,
) -> bool:
    """
    Interactive terminal rendering of a form.

    Prompts every field, re-prompts only the failing fields after a rejected
    submission, and offers a retry after a failed request. Returns True once
    the submission succeeded.
    """
    schema = controller.form.schema
    log_section(schema.name.capitalize())

    pending: List[FieldSpec] = list(schema.fields)
    while True:
        fill_fields(controller, pending, ask, ask_secret)
        result = asyncio.run(controller.submit())

        if isinstance(result, Invalid):
            pending = fields_to_reprompt(schema, result.errors)
            continue

        if result is not None and result.ok:
            return True

        log_error(controller.state.form_error or "Submission failed.")
        answer = ask("?  Try again? [Y/n] ").strip().lower()
        if answer in ("n", "no"):
            return False
        pending = list(schema.fields)


def navigate(path: str) -> None:
    log_success(f"Navigating to {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authforms",
        description="Sign in or sign up against the authentication API.",
    )
    parser.add_argument("form", choices=sorted(FORMS), help="Form to fill in.")
    parser.add_argument(
        "--endpoint",
        default=config.SERVER_ENDPOINT,
        help="API base endpoint (default: SERVER_ENDPOINT).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else parse_log_level(config.LOG_LEVEL)
    configure_logging(level)

    client = SubmissionClient(args.endpoint)
    controller = FormController(get_form(args.form), client, navigate)
    try:
        ok = run_form(controller)
    except (KeyboardInterrupt, EOFError):
        print()
        ok = False
    finally:
        controller.unmount()
        client.close()

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
