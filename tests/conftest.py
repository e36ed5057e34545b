"""Pytest fixtures for the web service client tests."""

from typing import Callable, List

import httpx
import pytest

from prestashop_webservice.clients.http_client import HTTPClient
from prestashop_webservice.clients.webservice_client import WebServiceClient
from prestashop_webservice.core.config import Settings
from prestashop_webservice.logging_config import MemorySink

BASE_URL = "http://shop.example.com"
KEY = "ZQ88PRJX5VWQHCWE4EE7SQ7HPNX00RAJ"

CUSTOMER_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<prestashop><customer><id><![CDATA[7]]></id>"
    "<firstname><![CDATA[John]]></firstname></customer></prestashop>"
)


@pytest.fixture
def settings():
    return Settings(http_timeout=5.0, debug=True)


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(settings, sink, requests_seen) -> Callable[..., WebServiceClient]:
    """Build a client whose transport answers with ``handler(request)``."""

    def factory(handler, debug=True, url=BASE_URL + "/"):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        http_client = HTTPClient(settings, transport=httpx.MockTransport(recording_handler))
        return WebServiceClient(url, KEY, debug, settings=settings, sink=sink, http_client=http_client)

    return factory
