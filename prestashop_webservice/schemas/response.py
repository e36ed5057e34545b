"""
schemas/response.py
-------------------

Model of a single HTTP exchange as seen by the client once the raw
response has been split. Instances live for the duration of one call.
"""

from __future__ import annotations

from typing import Dict, Optional
from pydantic import BaseModel, Field


class ResponseEnvelope(BaseModel):
    status_code: int
    header: str = ""
    body: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    # value of the server version header, when the response carried one
    version: Optional[str] = None


class RawResponse(BaseModel):
    """What a transport hands back: the status and the unsplit response text."""

    status_code: int
    raw: str
    # request line and headers as sent, credentials redacted
    request_header: str = ""
