"""Identifier and timestamp helpers shared by the models."""

from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone


def new_id(prefix: str) -> str:
    """Return an opaque id such as ``p_1718000000000_9f2c01ab``."""

    return f"{prefix}_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with a ``Z`` suffix."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
