"""
clients/webservice_client.py
----------------------------

Client for the PrestaShop Webservice API. One instance holds the shop
URL, the web service key and the debug flag; each operation runs the
same pipeline: validate options, build the target URL, send one
authenticated request, validate the status and decode the body.

==========  ======  ===========================================
Operation   Verb    Result
==========  ======  ===========================================
``get``     GET     decoded JSON (``output_format=JSON``)
``head``    HEAD    raw response header text
``add``     POST    parsed XML (:class:`xml.etree.ElementTree.Element`)
``edit``    PUT     parsed XML
``delete``  DELETE  ``True``
==========  ======  ===========================================

Usage example:

    from prestashop_webservice import WebServiceClient
    ws = WebServiceClient("https://shop.example.com/", "ABCDEF...", debug=False)
    customer = ws.get({"resource": "customers", "id": 5})
"""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional
from urllib.parse import unquote, urlsplit
from xml.etree import ElementTree

from prestashop_webservice.clients.http_client import HTTPClient
from prestashop_webservice.core.config import Settings, get_settings
from prestashop_webservice.core.errors import ConfigurationError, TransportError
from prestashop_webservice.core.parsing import parse_json, parse_xml
from prestashop_webservice.core.response import build_envelope
from prestashop_webservice.core.status import check_status_code
from prestashop_webservice.core.urls import (
    build_add_url,
    build_delete_url,
    build_edit_url,
    build_get_url,
    build_head_url,
    build_schema_url,
)
from prestashop_webservice.core.version import UNKNOWN_VERSION, is_at_least
from prestashop_webservice.logging_config import DiagnosticSink, LoggingSink, log_call
from prestashop_webservice.schemas.options import (
    AddOptions,
    DeleteOptions,
    EditOptions,
    GetOptions,
    HeadOptions,
    load_options,
)
from prestashop_webservice.schemas.response import ResponseEnvelope

PRESTASHOP_16 = "1.6.0.0"


class WebServiceClient:
    """Authenticated client for a shop's web service.

    :param url: root URL of the shop; one trailing slash is removed
    :param key: web service key, sent as the Basic auth user name
    :param debug: record request/response traces to ``sink``; ``None``
        falls back to ``settings.debug``
    :param settings: client settings; defaults to :func:`get_settings`
    :param sink: destination of debug traces; defaults to a
        :class:`~prestashop_webservice.logging_config.LoggingSink`
    :param http_client: transport exposing ``execute``; defaults to an
        :class:`~prestashop_webservice.clients.http_client.HTTPClient`
    :raises ConfigurationError: if the URL is not an absolute http(s)
        URL or the transport cannot execute requests
    """

    def __init__(self, url: str, key: str, debug: Optional[bool] = True, *,
                 settings: Optional[Settings] = None,
                 sink: Optional[DiagnosticSink] = None,
                 http_client: Any = None) -> None:
        self.settings = settings or get_settings()
        if http_client is None:
            http_client = HTTPClient(self.settings)
        if not callable(getattr(http_client, "execute", None)):
            raise ConfigurationError(
                "The HTTP transport is unavailable: the given client has no callable 'execute'"
            )
        try:
            parts = urlsplit(url or "")
        except ValueError as exc:
            raise ConfigurationError(f"Shop URL is malformed: {url!r} ({exc})") from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"Shop URL must be an absolute http(s) URL, got {url!r}")

        self.url = url[:-1] if url.endswith("/") else url
        self._key = key
        self.debug = self.settings.debug if debug is None else debug
        self.sink = sink or LoggingSink()
        self.http_client = http_client
        self._version = UNKNOWN_VERSION
        self._version_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r}, debug={self.debug!r}, version={self.version!r})"

    # ------------------------------------------------------------------
    # version
    # ------------------------------------------------------------------

    @property
    def version(self) -> str:
        """Last server version seen in a response, ``"unknown"`` until then."""
        with self._version_lock:
            return self._version

    def get_version(self) -> str:
        return self.version

    def _remember_version(self, envelope: ResponseEnvelope) -> None:
        if envelope.version is not None:
            with self._version_lock:
                self._version = envelope.version

    def is_compatible_with_minimum_version(self, minimum: str = PRESTASHOP_16) -> bool:
        """Whether the last seen server version is at least ``minimum``."""
        return is_at_least(self.version, minimum)

    def is_prestashop16(self) -> bool:
        return self.is_compatible_with_minimum_version(PRESTASHOP_16)

    # ------------------------------------------------------------------
    # pipeline
    # ------------------------------------------------------------------

    def _record(self, title: str, content: str) -> None:
        if self.debug:
            self.sink.record(title, content)

    def execute_request(self, method: str, url: str, content: Optional[str] = None,
                        transport_params: Optional[Mapping[str, Any]] = None) -> ResponseEnvelope:
        """Send one request and return the split response.

        :raises TransportError: if no status code was obtained
        :raises ProtocolError: if the response has no header/body boundary
        """
        method = method.upper()
        raw = self.http_client.execute(method, url, self._key, content=content,
                                       transport_params=transport_params)
        self._record("HTTP REQUEST HEADER", raw.request_header)
        if not raw.status_code:
            raise TransportError(f"HTTP transport error: no status code received from {url}")
        envelope = build_envelope(raw.status_code, raw.raw, method, self.settings.version_header)
        self._remember_version(envelope)

        self._record("HTTP RESPONSE HEADER", envelope.header)
        if method in ("PUT", "POST") and content is not None:
            self._record("XML SENT", unquote(content))
        if method not in ("DELETE", "HEAD"):
            self._record("RETURN HTTP BODY", envelope.body)
        return envelope

    # ------------------------------------------------------------------
    # operations
    # ------------------------------------------------------------------

    @log_call
    def add(self, options: Any, transport_params: Optional[Mapping[str, Any]] = None) -> ElementTree.Element:
        """Create a resource (POST) and return the stored representation.

        Requires ``resource`` or ``url`` and the XML payload
        (``postXml``). ``id_shop``/``id_group_shop`` select the shop
        context.
        """
        opts = load_options(AddOptions, options, "add")
        url = build_add_url(self.url, opts)
        envelope = self.execute_request("POST", url, content=opts.xml, transport_params=transport_params)
        check_status_code(envelope.status_code)
        return parse_xml(envelope.body)

    @log_call
    def get(self, options: Any, transport_params: Optional[Mapping[str, Any]] = None) -> Any:
        """Retrieve a resource, a list of resources or an explicit URL (GET).

        Options containing ``filter``, ``display``, ``sort``, ``limit``,
        ``id_shop`` or ``id_group_shop`` become query parameters. The
        body is decoded as JSON; an empty or malformed body gives
        ``None`` unless ``strict_json`` is enabled.
        """
        opts = load_options(GetOptions, options, "get")
        url = build_get_url(self.url, opts)
        envelope = self.execute_request("GET", url, transport_params=transport_params)
        check_status_code(envelope.status_code)
        return parse_json(envelope.body, strict=self.settings.strict_json)

    @log_call
    def head(self, options: Any, transport_params: Optional[Mapping[str, Any]] = None) -> str:
        """Request only the headers of a resource (HEAD) and return them as text."""
        opts = load_options(HeadOptions, options, "head")
        url = build_head_url(self.url, opts)
        envelope = self.execute_request("HEAD", url, transport_params=transport_params)
        check_status_code(envelope.status_code)
        return envelope.header

    @log_call
    def edit(self, options: Any, transport_params: Optional[Mapping[str, Any]] = None) -> ElementTree.Element:
        """Replace a resource (PUT) and return the stored representation.

        Requires ``url`` or ``resource`` and ``id``, plus the XML payload
        (``putXml``).
        """
        opts = load_options(EditOptions, options, "edit")
        url = build_edit_url(self.url, opts)
        envelope = self.execute_request("PUT", url, content=opts.xml, transport_params=transport_params)
        check_status_code(envelope.status_code)
        return parse_xml(envelope.body)

    @log_call
    def delete(self, options: Any, transport_params: Optional[Mapping[str, Any]] = None) -> bool:
        """Delete one resource, or several when ``id`` is a list (DELETE)."""
        opts = load_options(DeleteOptions, options, "delete")
        url = build_delete_url(self.url, opts)
        envelope = self.execute_request("DELETE", url, transport_params=transport_params)
        check_status_code(envelope.status_code)
        return True

    def get_schema(self, resource: str, transport_params: Optional[Mapping[str, Any]] = None) -> Any:
        """Blank schema of ``resource`` (``?schema=blank``).

        The explicit URL bypasses ``output_format=JSON``, so the JSON
        format is requested through the ``Output-Format`` header unless
        the caller sends headers of their own.
        """
        params = dict(transport_params or {})
        params.setdefault("headers", {
            "Content-type": self.settings.default_content_type,
            "Output-Format": "JSON",
        })
        return self.get({"url": build_schema_url(self.url, resource)}, transport_params=params)
