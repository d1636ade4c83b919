"""Synthetic Identifiers: opaque IDs, secret values and timestamps.

Invariants:
    - Random IDs are uuid4-derived; uniqueness is probabilistic, nothing is recorded
    - deployment_id() is deterministic: same name, same ID
    - Timestamps are UTC, ISO-8601, second precision, "Z" suffix
"""

import uuid
from datetime import datetime, timezone


def new_id(prefix: str, length: int = 8) -> str:
    """Return ``<prefix>_<length hex chars>``, e.g. ``key_1a2b3c4d``."""
    return f"{prefix}_{uuid.uuid4().hex[:length]}"


def new_secret(prefix: str) -> str:
    """Secret key value: fixed prefix followed by a fresh 32-char token."""
    return f"{prefix}{uuid.uuid4().hex}"


def deployment_id(name: str) -> str:
    return f"dep_{name.lower()}_123"


def utc_now_iso(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
