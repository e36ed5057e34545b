"""
core/version.py
---------------

Dotted-numeric version ordering for the ``PSWS-Version`` header values
(``1.6.1.24``, ``1.7.8.0``, ``8.1.2``...).
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

UNKNOWN_VERSION = "unknown"

_VERSION_RE = re.compile(r"^\s*v?(\d+(?:\.\d+)*)")


def parse_version(value: str) -> Optional[Tuple[int, ...]]:
    """Return the numeric components of ``value`` or ``None``.

    Components are compared as given, so a shorter version sorts before a
    longer one with the same prefix (``1.6`` < ``1.6.0.0``), as PHP's
    ``version_compare`` orders them. Anything after the leading numeric
    part (``-rc1``, ``+build``) is ignored.
    """
    match = _VERSION_RE.match(value or "")
    if not match:
        return None
    return tuple(int(p) for p in match.group(1).split("."))


def is_at_least(version: str, minimum: str) -> bool:
    """True when ``version`` is greater than or equal to ``minimum``.

    Unknown or unparsable versions never satisfy a minimum.
    """
    if version == UNKNOWN_VERSION:
        return False
    current = parse_version(version)
    required = parse_version(minimum)
    if current is None or required is None:
        return False
    return current >= required
