"""HTTP transport shared by the Datadog API helpers.

`Client.do_json_request` is the single place requests are sent from. It
serialises the body, attaches credentials, checks the status and decodes
the response. Retries and pooling are left to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .config import settings

__all__ = ["APIError", "Client"]

logger = logging.getLogger(__name__)

_USER_AGENT = "datadog-monitors/0.1 (+python-requests)"


class APIError(RuntimeError):
    """Non-2xx response from the Datadog API."""

    def __init__(self, status_code: int, snippet: str) -> None:
        super().__init__(f"Datadog HTTP {status_code}: {snippet}")
        self.status_code = status_code
        self.snippet = snippet


def _encode_body(body: Any) -> str | None:
    if body is None:
        return None
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    return json.dumps(body)


class Client:
    """Credentials and endpoint for talking to the Datadog API."""

    def __init__(
        self,
        api_key: str | None = None,
        app_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key or settings.DATADOG_API_KEY
        self.app_key = app_key or settings.DATADOG_APP_KEY
        self.base_url = (base_url or settings.DATADOG_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.DATADOG_TIMEOUT_S

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"

    def _ensure_api_key(self) -> None:
        if not self.api_key:
            raise RuntimeError("DATADOG_API_KEY is not configured")

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": _USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
            "DD-API-KEY": self.api_key or "",
        }
        if self.app_key:
            headers["DD-APPLICATION-KEY"] = self.app_key
        return headers

    def do_json_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a JSON request and return the decoded response.

        Args:
            method: HTTP verb, e.g. "GET".
            path: API path starting with "/", e.g. "/v1/monitor".
            body: Object with `to_dict()` or a plain JSON value.
            params: Query string values, URL-encoded by requests.

        Returns:
            Decoded JSON, or None when the response has no body.

        Raises:
            RuntimeError: If no API key is configured.
            APIError: On a non-2xx status.
        """
        self._ensure_api_key()
        url = f"{self.base_url}{path}"
        logger.debug("Datadog %s %s", method, path)
        resp = requests.request(
            method,
            url,
            params=params,
            data=_encode_body(body),
            headers=self._headers(),
            timeout=self.timeout,
        )
        logger.debug("Datadog %s %s -> HTTP %d", method, path, resp.status_code)
        if not resp.ok:
            snippet = resp.text[:500].replace("\n", " ")
            raise APIError(resp.status_code, snippet)
        if not resp.text.strip():
            return None
        return resp.json()
