"""
clients/http_client.py
----------------------

HTTP transport for the web service client. Each call opens its own
``httpx.Client``, sends exactly one request and closes the session
before returning, whatever the outcome. There is no retry or
pooling layer; failures go straight back to the caller.

Transport parameters are merged the same way for every request: the
client's defaults (Basic auth with the web service key, the JSON
content type, the configured timeout and redirect policy) are used
unless the caller supplies the same parameter, in which case the
caller's value wins; parameters only the caller knows about are passed
through untouched. Parameters understood by
:meth:`httpx.Client.request` go to the request, the rest (``verify``,
``proxy``, ``http2``...) configure the session.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Mapping, Optional
import httpx

from prestashop_webservice.core.config import Settings, get_settings
from prestashop_webservice.core.errors import ProtocolError, TransportError
from prestashop_webservice.logging_config import log_http_request, logger
from prestashop_webservice.schemas.response import RawResponse

# Keyword arguments accepted by httpx.Client.request
REQUEST_PARAMS = frozenset({
    "content", "data", "files", "json", "params", "headers",
    "cookies", "auth", "follow_redirects", "timeout", "extensions",
})

REDACTED = "<redacted>"


def merge_transport_params(defaults: Mapping[str, Any], overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Combine default transport parameters with caller overrides.

    A default is replaced only when the caller supplies a non-``None``
    value for the same key. Caller-only keys are kept as given.
    """
    overrides = overrides or {}
    merged: Dict[str, Any] = {}
    for key, value in defaults.items():
        override = overrides.get(key)
        merged[key] = override if override is not None else value
    for key, value in overrides.items():
        if key not in merged:
            merged[key] = value
    return merged


def render_response(response: httpx.Response) -> str:
    """Rebuild the wire form of ``response``: status line, headers, blank line, body."""
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(
        f"{name.decode('latin-1')}: {value.decode('latin-1')}"
        for name, value in response.headers.raw
    )
    return "\r\n".join(lines) + "\r\n\r\n" + response.text


def render_request(request: httpx.Request) -> str:
    """Request line and headers as sent, with the Authorization value hidden."""
    target = request.url.raw_path.decode("ascii")
    lines = [f"{request.method} {target} HTTP/1.1"]
    for name, value in request.headers.raw:
        header = name.decode("latin-1")
        shown = REDACTED if header.lower() == "authorization" else value.decode("latin-1")
        lines.append(f"{header}: {shown}")
    return "\r\n".join(lines)


def _log_http_error(method: str, url: str, exc: Exception) -> None:
    logger.error(json.dumps({
        "event": "http_error",
        "method": method,
        "url": url,
        "detail": str(exc),
    }))


class HTTPClient:
    """Synchronous one-request-per-session HTTP transport.

    :param settings: client settings; defaults to :func:`get_settings`
    :param transport: optional ``httpx`` transport used by every session,
        e.g. :class:`httpx.MockTransport` in tests
    """

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None) -> None:
        self.settings = settings or get_settings()
        self.timeout = self.settings.http_timeout
        self._transport = transport

    def default_params(self, key: str) -> Dict[str, Any]:
        return {
            "headers": {"Content-type": self.settings.default_content_type},
            "auth": (key, ""),
            "timeout": self.timeout,
            "follow_redirects": self.settings.follow_redirects,
        }

    def execute(self, method: str, url: str, key: str, content: Optional[str] = None,
                transport_params: Optional[Mapping[str, Any]] = None) -> RawResponse:
        """Send one request and return its status with the raw response text.

        :raises TransportError: if no response was obtained (DNS, refused
            connection, TLS failure, timeout, unusable URL...)
        :raises ProtocolError: if a response arrived but could not be
            read (bad content encoding, redirect loop)
        """
        method = method.upper()
        params = merge_transport_params(self.default_params(key), transport_params)
        if content is not None and params.get("content") is None:
            params["content"] = content
        request_kwargs = {k: v for k, v in params.items() if k in REQUEST_PARAMS}
        session_kwargs = {k: v for k, v in params.items() if k not in REQUEST_PARAMS}
        if self._transport is not None:
            session_kwargs.setdefault("transport", self._transport)

        start_time = time.time()
        log_http_request(method, url, headers=request_kwargs.get("headers"))
        with httpx.Client(**session_kwargs) as session:
            try:
                response = session.request(method, url, **request_kwargs)
            except httpx.TransportError as exc:
                _log_http_error(method, url, exc)
                raise TransportError(f"HTTP transport error: {exc!r}") from exc
            except (httpx.DecodingError, httpx.TooManyRedirects) as exc:
                _log_http_error(method, url, exc)
                raise ProtocolError(f"Bad HTTP response: {exc!r}") from exc
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                _log_http_error(method, url, exc)
                raise TransportError(f"HTTP request failed: {exc!r}") from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method, url, status=response.status_code, duration_ms=duration_ms)
        return RawResponse(
            status_code=response.status_code,
            raw=render_response(response),
            request_header=render_request(response.request),
        )
