"""Synchronous HTTP transport for the Notion API.

:class:`NotionTransport` sends one request per call:

1. Send the HTTP request with auth and version headers.
2. On ``2xx`` -- return the parsed JSON response.
3. On any other status -- raise the matching :class:`MdNotionError` subclass.
4. On a transport failure -- raise :class:`MdNotionNetworkError`.

There is no retry or client-side pacing; callers that need it wrap the
transport.
"""

from __future__ import annotations

import json as _json
import sys
import time
from typing import Any, NoReturn

import httpx

from mdnotion.config import MdNotionConfig
from mdnotion.errors import (
    MdNotionAPIError,
    MdNotionAuthError,
    MdNotionNetworkError,
    MdNotionNotFoundError,
    MdNotionPermissionError,
    MdNotionRateLimitError,
    MdNotionValidationError,
)
from mdnotion.observability import NoopMetricsHook, fields, get_logger
from mdnotion.utils.redact import redact

log = get_logger("mdnotion.transport")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_retry_after(response: httpx.Response) -> float | None:
    """Extract the ``Retry-After`` header value as a float, or ``None``."""
    raw = response.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return float(raw)
    except (ValueError, TypeError):
        return None


def _raise_for_status(response: httpx.Response, method: str, path: str) -> NoReturn:
    """Raise the :class:`MdNotionError` subclass matching a non-2xx response."""
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    notion_message = body.get("message", response.text[:500])
    notion_code = body.get("code", "")

    if status == 400:
        raise MdNotionValidationError(
            message=f"Validation error on {method} {path}: {notion_message}",
            context={"status_code": status, "notion_code": notion_code, "body": body},
        )
    if status == 401:
        raise MdNotionAuthError(
            message=f"Authentication failed on {method} {path}: {notion_message}",
            context={"status_code": status, "notion_code": notion_code},
        )
    if status == 403:
        raise MdNotionPermissionError(
            message=f"Permission denied on {method} {path}: {notion_message}",
            context={
                "status_code": status,
                "notion_code": notion_code,
                "operation": f"{method} {path}",
            },
        )
    if status == 404:
        raise MdNotionNotFoundError(
            message=f"Resource not found on {method} {path}: {notion_message}",
            context={"status_code": status, "notion_code": notion_code, "path": path},
        )
    if status == 429:
        raise MdNotionRateLimitError(
            message=f"Rate limited on {method} {path}: {notion_message}",
            context={
                "status_code": status,
                "retry_after_seconds": _parse_retry_after(response),
            },
        )

    raise MdNotionAPIError(
        message=f"Notion API error {status} on {method} {path}: {notion_message}",
        context={"status_code": status, "notion_code": notion_code, "body": body},
    )


def _dump_payload(
    method: str,
    url: str,
    payload: dict | None,
    response: httpx.Response,
    token: str | None = None,
) -> None:
    """Write a redacted debug dump of the request/response to stderr."""
    try:
        response_body: Any = response.json()
    except ValueError:
        response_body = response.text[:1000]

    dump: dict[str, Any] = {
        "method": method,
        "url": url,
        "response_status": response.status_code,
        "response_body": response_body,
    }
    if payload is not None:
        dump["request_body"] = payload
    print(_json.dumps(redact(dump, token), indent=2, default=str), file=sys.stderr)


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class NotionTransport:
    """Synchronous HTTP transport with auth headers and typed errors.

    Parameters
    ----------
    config:
        A :class:`MdNotionConfig` supplying the token, base URL, API
        version, timeout and proxy.
    """

    def __init__(self, config: MdNotionConfig) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._client = httpx.Client(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.token}",
                "Notion-Version": config.notion_version,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=config.http_proxy,
        )

    def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the Notion API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
        path:
            API path relative to ``base_url`` (e.g. ``/pages``).
        **kwargs:
            Forwarded to :meth:`httpx.Client.request`; use ``json=`` for
            request bodies.

        Returns
        -------
        dict
            Parsed JSON response body (``{}`` for empty responses).

        Raises
        ------
        MdNotionValidationError
            On 400 responses.
        MdNotionAuthError
            On 401 responses.
        MdNotionPermissionError
            On 403 responses.
        MdNotionNotFoundError
            On 404 responses.
        MdNotionRateLimitError
            On 429 responses.
        MdNotionAPIError
            On any other non-2xx response.
        MdNotionNetworkError
            On timeouts and connection failures.
        """
        t0 = time.monotonic()
        try:
            response = self._client.request(method, path, **kwargs)
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            self._metrics.increment(
                "mdnotion.requests_total",
                tags={"method": method, "path": path, "status": "error"},
            )
            log.warning(
                "Request network error",
                extra=fields(op="request", method=method, path=path, error=str(exc)),
            )
            raise MdNotionNetworkError(
                message=f"Network error on {method} {path}: {exc}",
                context={"url": path},
                cause=exc,
            ) from exc

        elapsed_ms = (time.monotonic() - t0) * 1000
        status = str(response.status_code)
        self._metrics.increment(
            "mdnotion.requests_total",
            tags={"method": method, "path": path, "status": status},
        )
        self._metrics.timing(
            "mdnotion.request_duration_ms",
            elapsed_ms,
            tags={"method": method, "path": path, "status": status},
        )
        log.debug(
            "Notion API request",
            extra=fields(
                op="request",
                method=method,
                path=path,
                status_code=response.status_code,
                duration_ms=round(elapsed_ms, 2),
            ),
        )

        if self._config.debug_dump_payload:
            _dump_payload(
                method, str(response.url), kwargs.get("json"), response,
                token=self._config.token,
            )

        if 200 <= response.status_code < 300:
            if response.status_code == 204 or not response.content:
                return {}
            result: dict = response.json()
            return result

        _raise_for_status(response, method, path)

    def close(self) -> None:
        """Close the underlying HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> NotionTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
