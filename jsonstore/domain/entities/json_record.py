"""Domain entity — a stored JSON document and its list summary."""

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any


def generate_record_id() -> str:
    """Return a fresh opaque id: 128 random bits as 32 lowercase hex characters."""
    return secrets.token_hex(16)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class JsonRecord:
    """A JSON payload stored under a server-generated id.

    ``data`` may be any JSON value (object, array, number, string, bool or
    None). ``id`` and ``created_at`` never change after creation.
    """

    data: Any
    id: str = field(default_factory=generate_record_id)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        # A new record is stamped once: both timestamps share the same instant.
        if self.updated_at is None:
            self.updated_at = self.created_at

    def replace_data(self, data: Any) -> None:
        """Swap the payload and move updated_at strictly forward."""
        self.data = data
        now = utc_now()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now


@dataclass(frozen=True)
class JsonRecordSummary:
    """List view of a record: everything except the payload."""

    id: str
    created_at: datetime
    updated_at: datetime
