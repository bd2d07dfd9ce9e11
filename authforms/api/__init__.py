"""Public façade for the authforms.api package.

This module exposes the HTTP submission client used by the forms to talk
to the authentication API. Callers should import it from this façade
instead of the internal client module.
"""

from .client import GENERIC_NETWORK_ERROR, SubmissionClient, error_message_from_response

__all__ = [
    "SubmissionClient",
    "error_message_from_response",
    "GENERIC_NETWORK_ERROR",
]
