import asyncio
from typing import Any, Mapping, Optional

import requests

from authforms.core import (
    Failure,
    SubmissionOutcome,
    Success,
    log_debug,
    log_step,
    log_warning,
)

GENERIC_NETWORK_ERROR = "Network Error"


def _message_from_json(data: Any) -> Optional[str]:
    if isinstance(data, str):
        return data.strip() or None

    if isinstance(data, list):
        parts = [_message_from_json(item) for item in data]
        parts = [p for p in parts if p]
        return "; ".join(parts) or None

    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            if key in data:
                found = _message_from_json(data[key])
                if found:
                    return found

    return None


def error_message_from_response(response: requests.Response) -> str:
    """
    Best-effort human-readable message for a failed response.

    Looks at a JSON body first (message / error / detail, strings or lists
    of {"message": ...} entries), then at a plain text body, and falls back
    to a generic status description.
    """
    message: Optional[str] = None
    try:
        message = _message_from_json(response.json())
    except ValueError:
        text = (response.text or "").strip()
        message = text or None

    return message or f"Request failed with status code {response.status_code}"


class SubmissionClient:
    """
    POSTs validated form payloads to the authentication API.

    Credential-bearing requests go through a requests.Session so the
    session cookie set by the server is kept and sent back; the others use
    a bare requests.post with no cookie jar.
    """

    def __init__(
        self,
        base_endpoint: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_endpoint = base_endpoint.rstrip("/")
        self.session = session or requests.Session()

    def build_url(self, endpoint_suffix: str) -> str:
        return f"{self.base_endpoint}{endpoint_suffix}"

    def _post(
        self,
        url: str,
        payload: Mapping[str, str],
        with_credentials: bool,
    ) -> requests.Response:
        if with_credentials:
            return self.session.post(url, json=dict(payload))
        return requests.post(url, json=dict(payload))

    def post(
        self,
        endpoint_suffix: str,
        payload: Mapping[str, str],
        with_credentials: bool = False,
    ) -> SubmissionOutcome:
        """Blocking variant of submit()."""
        url = self.build_url(endpoint_suffix)
        log_step(f"POST {url} (fields: {', '.join(payload)})")

        try:
            response = self._post(url, payload, with_credentials)
        except requests.RequestException as e:
            message = str(e) or GENERIC_NETWORK_ERROR
            log_warning(f"POST {url} failed: {message}")
            return Failure(message=message)

        if 200 <= response.status_code < 300:
            log_debug(f"POST {url} -> {response.status_code}")
            return Success()

        message = error_message_from_response(response)
        log_warning(f"POST {url} -> {response.status_code}: {message}")
        return Failure(message=message)

    async def submit(
        self,
        endpoint_suffix: str,
        payload: Mapping[str, str],
        with_credentials: bool = False,
    ) -> SubmissionOutcome:
        """Send one request without blocking the event loop."""
        return await asyncio.to_thread(
            self.post, endpoint_suffix, payload, with_credentials
        )

    def close(self) -> None:
        self.session.close()
