"""
core/errors.py
--------------

Exception family raised by the web service client. Every failure in the
request pipeline surfaces as a subclass of :class:`WebServiceError` so
callers can catch the whole family at once or branch on the concrete
type (or on the ``kind`` attribute when matching on strings is more
convenient, e.g. in structured logs).
"""

from __future__ import annotations

from typing import Optional


class WebServiceError(Exception):
    """Base class for all web service client errors."""

    kind = "webservice"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(WebServiceError):
    """The client cannot be built with the given transport or base URL."""

    kind = "configuration"


class InvalidOptionsError(WebServiceError):
    """The option set is incomplete or contradictory for an operation."""

    kind = "invalid_options"

    def __init__(self, operation: str, detail: Optional[str] = None) -> None:
        message = f"Bad parameters given for {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
        self.detail = detail


class TransportError(WebServiceError):
    """The request never produced a status code (connection level failure)."""

    kind = "transport"


class ProtocolError(WebServiceError):
    """The raw response could not be split into header and body."""

    kind = "protocol"


class HttpStatusError(WebServiceError):
    """The server answered with a status other than 200 or 201."""

    kind = "http_status"

    def __init__(self, status_code: int, reason: str, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ParseError(WebServiceError):
    """The response body could not be decoded."""

    kind = "parse"
