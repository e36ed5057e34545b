"""
core/status.py
--------------

Classification of response status codes. Only 200 and 201 are treated
as success; everything else raises :class:`HttpStatusError` before any
attempt is made to read the body.
"""

from __future__ import annotations

from typing import Dict

from prestashop_webservice.core.errors import HttpStatusError

SUCCESS_CODES = frozenset({200, 201})

# Codes the service documents, with the reason reported to callers
KNOWN_FAILURES: Dict[int, str] = {
    204: "No content",
    400: "Bad Request",
    401: "Unauthorized",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}

UNEXPECTED_REASON = "Unexpected status"

_FAILED_LABEL = "This call to PrestaShop Web Services failed and returned an HTTP status of %d. That means: %s."
_UNEXPECTED_LABEL = "This call to PrestaShop Web Services returned an unexpected HTTP status of: %d"


def check_status_code(status_code: int) -> None:
    """Raise :class:`HttpStatusError` unless ``status_code`` is 200 or 201."""
    if status_code in SUCCESS_CODES:
        return
    reason = KNOWN_FAILURES.get(status_code)
    if reason is not None:
        raise HttpStatusError(status_code, reason, _FAILED_LABEL % (status_code, reason))
    raise HttpStatusError(status_code, UNEXPECTED_REASON, _UNEXPECTED_LABEL % status_code)
