"""
core/config.py
----------------

Client configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings control the transport defaults
(timeout, redirects, content type), the name of the server version
header and how strictly JSON bodies are decoded. Values passed directly
to :class:`~prestashop_webservice.clients.webservice_client.WebServiceClient`
always take precedence over the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``PSWS_``.  For example, to override the default
    request timeout you can set ``PSWS_HTTP_TIMEOUT=15``.
    """

    # HTTP transport settings
    http_timeout: float = Field(30.0, gt=0, description="Timeout for a single HTTP request in seconds.")
    follow_redirects: bool = Field(False, description="Let the transport follow 3xx responses.")
    default_content_type: str = Field("application/json", description="Content-type sent with every request.")

    # Response handling
    version_header: str = Field("PSWS-Version", description="Response header carrying the server version.")
    strict_json: bool = Field(False, description="Raise ParseError on malformed JSON instead of returning None.")

    # Diagnostics
    debug: bool = Field(True, description="Record request/response traces when the client does not say otherwise.")

    model_config = SettingsConfigDict(env_prefix="PSWS_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Using a cache prevents environment parsing on every client
    construction. Call ``get_settings.cache_clear()`` after changing the
    environment to pick up new values.
    """
    return Settings()
