"""Error hierarchy for mdnotion.

Every public error class inherits from :class:`MdNotionError`.  Each carries
a machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The Markdown converter itself never raises these; they come from the Notion
API layer.  Invalid size limits are reported with :class:`ValueError`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error mdnotion can raise."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MdNotionError(Exception):
    """Base exception for all mdnotion errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


class _CodedError(MdNotionError):
    """Subclasses fix ``code`` via the ``error_code`` class attribute."""

    error_code: str = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=self.error_code,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# API / transport errors
# ---------------------------------------------------------------------------

class MdNotionValidationError(_CodedError):
    """Notion API returned 400 -- the request payload was invalid.

    Context keys: ``status_code``, ``notion_code``, ``body``.
    """

    error_code = ErrorCode.VALIDATION_ERROR


class MdNotionAuthError(_CodedError):
    """Notion API returned 401 -- the integration token is invalid or expired.

    Context keys: ``status_code``, ``notion_code``.
    """

    error_code = ErrorCode.AUTH_ERROR


class MdNotionPermissionError(_CodedError):
    """Notion API returned 403 -- the integration lacks access to the resource.

    Context keys: ``status_code``, ``notion_code``, ``operation``.
    """

    error_code = ErrorCode.PERMISSION_ERROR


class MdNotionNotFoundError(_CodedError):
    """Notion API returned 404 -- the parent page does not exist or is not
    shared with the integration.

    Context keys: ``status_code``, ``notion_code``, ``path``.
    """

    error_code = ErrorCode.NOT_FOUND


class MdNotionRateLimitError(_CodedError):
    """Notion API returned 429.  Requests are not retried; back off and
    call again.

    Context keys: ``status_code``, ``retry_after_seconds``.
    """

    error_code = ErrorCode.RATE_LIMITED


class MdNotionAPIError(_CodedError):
    """Any other non-2xx response (409, 5xx, ...).

    Context keys: ``status_code``, ``notion_code``, ``body``.
    """

    error_code = ErrorCode.API_ERROR


class MdNotionNetworkError(_CodedError):
    """A transport-level failure occurred (timeout, DNS, connection reset).

    Context keys: ``url``.
    """

    error_code = ErrorCode.NETWORK_ERROR
