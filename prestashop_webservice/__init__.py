"""
prestashop_webservice package
-----------------------------

Synchronous client for the PrestaShop Webservice API. Importing the
package exposes the client, its option models, the error family and
the diagnostic sinks.
"""

from .clients.webservice_client import WebServiceClient
from .core.config import Settings, get_settings
from .core.errors import (
    ConfigurationError,
    HttpStatusError,
    InvalidOptionsError,
    ParseError,
    ProtocolError,
    TransportError,
    WebServiceError,
)
from .logging_config import DiagnosticSink, LoggingSink, MemorySink, configure_logging
from .schemas.options import AddOptions, DeleteOptions, EditOptions, GetOptions, HeadOptions

__version__ = "1.0.0"

__all__ = [
    "WebServiceClient",
    "Settings",
    "get_settings",
    "WebServiceError",
    "ConfigurationError",
    "InvalidOptionsError",
    "TransportError",
    "ProtocolError",
    "HttpStatusError",
    "ParseError",
    "DiagnosticSink",
    "LoggingSink",
    "MemorySink",
    "configure_logging",
    "GetOptions",
    "HeadOptions",
    "AddOptions",
    "EditOptions",
    "DeleteOptions",
]
