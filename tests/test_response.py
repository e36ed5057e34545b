import pytest

from prestashop_webservice.core.errors import ProtocolError
from prestashop_webservice.core.response import build_envelope, parse_headers, split_response

RAW = (
    "HTTP/1.1 200 OK\r\n"
    "Content-Type: application/json\r\n"
    "PSWS-Version: 1.7.8.0\r\n"
    "Date: Mon, 19 Oct 2026 10:00:00 GMT\r\n"
    "\r\n"
    '{"customers": []}'
)


def test_split_at_first_blank_line():
    header, body = split_response(RAW + "\r\n\r\ntrailer", "GET")

    assert header.startswith("HTTP/1.1 200 OK")
    assert body == '{"customers": []}\r\n\r\ntrailer'


def test_missing_boundary_is_a_protocol_error():
    with pytest.raises(ProtocolError, match="Bad HTTP response"):
        split_response("HTTP/1.1 200 OK\r\nContent-Length: 0", "GET")


def test_head_tolerates_missing_boundary():
    assert split_response("HTTP/1.1 200 OK\r\nPSWS-Version: 1.6.1.0", "head") == (
        "HTTP/1.1 200 OK\r\nPSWS-Version: 1.6.1.0",
        "",
    )


def test_parse_headers_keeps_single_colon_lines_only():
    header, _ = split_response(RAW, "GET")

    assert parse_headers(header) == {
        "Content-Type": "application/json",
        "PSWS-Version": "1.7.8.0",
    }


def test_envelope_carries_version():
    envelope = build_envelope(200, RAW, "GET", "PSWS-Version")

    assert envelope.status_code == 200
    assert envelope.body == '{"customers": []}'
    assert envelope.version == "1.7.8.0"


def test_envelope_version_lookup_ignores_case():
    raw = "HTTP/2 200 OK\r\npsws-version: 8.1.0\r\n\r\n"

    assert build_envelope(200, raw, "GET", "PSWS-Version").version == "8.1.0"


def test_envelope_without_version_header():
    raw = "HTTP/1.1 201 Created\r\nServer: nginx\r\n\r\n<prestashop/>"

    assert build_envelope(201, raw, "POST", "PSWS-Version").version is None
