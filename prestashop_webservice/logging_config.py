"""
logging_config.py
------------------

Shared logging utilities for the web service client.  Everything goes
through Python's built‑in ``logging`` module under the
``prestashop_webservice`` logger so applications decide where output
ends up.  Messages are serialised as JSON to make them easy to parse
downstream.

Two kinds of output are produced:

* developer tracing at DEBUG level (``log_call`` and
  ``log_http_request``), always available to whoever enables it;
* request/response diagnostics, produced only when the client runs in
  debug mode, and handed to a :class:`DiagnosticSink`.  The default
  :class:`LoggingSink` writes them to the logger; callers can inject any
  other sink (for example :class:`MemorySink` in tests).

Nothing here configures handlers at import time; applications that
want a ready‑made stdout handler call :func:`configure_logging`.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger("prestashop_webservice")

# Substrings that mark a key or header as sensitive.  ``key`` covers the
# web service authentication key.
SENSITIVE_KEYWORDS = ("token", "password", "secret", "key", "authorization")


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stdout handler with a timestamped format to the client logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _is_sensitive(name: Any) -> bool:
    lowered = str(name).lower()
    return any(keyword in lowered for keyword in SENSITIVE_KEYWORDS)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries lose every key that looks sensitive (see
    ``SENSITIVE_KEYWORDS``), byte strings are replaced by their size,
    lists and tuples are processed element‑wise and pydantic models are
    dumped first.  Anything that still is not JSON serialisable is
    returned as its ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if _is_sensitive(k):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump())
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of client operations.

    Emits a ``call_start`` event before the call and a ``call_end``
    event after it returns, both at DEBUG level with sanitised
    arguments and result.  Exceptions raised by the wrapped callable are
    not intercepted.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__name__,
                "args": _sanitize(args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__name__,
                "result": _sanitize(result),
            }))
        return result

    wrapper.__signature__ = inspect.signature(func)  # type: ignore[attr-defined]
    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     params: Dict[str, Any] | None = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Called by the transport before and after each request.  Sensitive
    headers are removed and only high‑level information (method, URL,
    status and duration) is recorded; bodies are never logged here.
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if not _is_sensitive(k)}
    if params:
        data["params"] = _sanitize(params)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))


class DiagnosticSink:
    """Destination for debug‑mode request/response traces."""

    def record(self, title: str, content: str) -> None:
        raise NotImplementedError


class LoggingSink(DiagnosticSink):
    """Write diagnostics to the client logger as JSON lines."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def record(self, title: str, content: str) -> None:
        logger.log(self.level, json.dumps({
            "event": "webservice_debug",
            "title": title,
            "content": content,
        }))


class MemorySink(DiagnosticSink):
    """Keep diagnostics in memory as ``(title, content)`` pairs."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, str]] = []

    def record(self, title: str, content: str) -> None:
        self.events.append((title, content))

    def titles(self) -> List[str]:
        return [title for title, _ in self.events]
