"""
core/response.py
----------------

Turns the raw text of an HTTP response (status line, header lines, a
blank line, then the body) into a :class:`ResponseEnvelope`.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from prestashop_webservice.core.errors import ProtocolError
from prestashop_webservice.schemas.response import ResponseEnvelope

HEADER_BOUNDARY = "\r\n\r\n"


def split_response(raw: str, method: str) -> Tuple[str, str]:
    """Split ``raw`` at the first blank line into ``(header, body)``.

    HEAD responses may legitimately stop after the headers; any other
    method without a boundary raises :class:`ProtocolError`.
    """
    index = raw.find(HEADER_BOUNDARY)
    if index == -1:
        if method.upper() != "HEAD":
            raise ProtocolError(f"Bad HTTP response: {raw}")
        return raw, ""
    return raw[:index], raw[index + len(HEADER_BOUNDARY):]


def parse_headers(header: str) -> Dict[str, str]:
    """Map ``Name: Value`` lines of ``header`` to a dictionary.

    Lines are split on every colon; only lines yielding exactly two
    parts are kept, so the status line and values containing a colon
    (dates, URLs) are left out.
    """
    headers: Dict[str, str] = {}
    for line in header.split("\n"):
        parts = [p.strip() for p in line.split(":")]
        if len(parts) == 2:
            headers[parts[0]] = parts[1]
    return headers


def find_header(headers: Dict[str, str], name: str) -> Optional[str]:
    """Look ``name`` up exactly, then case-insensitively (HTTP/2 lowercases names)."""
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def build_envelope(status_code: int, raw: str, method: str, version_header: str) -> ResponseEnvelope:
    header, body = split_response(raw, method)
    headers = parse_headers(header)
    return ResponseEnvelope(
        status_code=status_code,
        header=header,
        body=body,
        headers=headers,
        version=find_header(headers, version_header),
    )
