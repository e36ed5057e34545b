"""
core/parsing.py
---------------

Decoding of response bodies. Read operations receive JSON (the client
forces ``output_format=JSON``) while write operations answer with the
XML representation of the stored resource.
"""

from __future__ import annotations

import json
from typing import Any
from xml.etree import ElementTree

from prestashop_webservice.core.errors import ParseError


def parse_json(body: str, strict: bool = False) -> Any:
    """Decode a JSON body.

    An empty or malformed body yields ``None`` unless ``strict`` is set,
    in which case a malformed body raises :class:`ParseError`.
    """
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError as exc:
        if strict:
            raise ParseError(f"HTTP JSON response is not parsable: {exc}") from exc
        return None


def parse_xml(body: str) -> ElementTree.Element:
    """Parse an XML body into an :class:`~xml.etree.ElementTree.Element`.

    :raises ParseError: if the body is empty or not well-formed; the
        parser diagnostic (message and position) is part of the error.
    """
    if body == "":
        raise ParseError("HTTP response is empty")
    try:
        return ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        line, column = exc.position
        raise ParseError(
            f"HTTP XML response is not parsable: {exc} (line {line}, column {column})"
        ) from exc
