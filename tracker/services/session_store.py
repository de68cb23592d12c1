"""In-process session table: opaque reference -> identity record, with absolute TTL."""

import secrets
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SessionRecord:
    data: dict[str, Any]
    expires_at: float


class SessionStore:
    """
    Thread-safe key-value store with per-entry expiry.

    Expired entries are evicted lazily when looked up; purge_expired() sweeps the
    whole table and runs on every new session. The clock is injectable so
    expiry can be exercised without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._records: dict[str, SessionRecord] = {}

    def create(self, data: dict[str, Any], ttl_seconds: float) -> str:
        """Store data under a fresh unguessable reference and return the reference."""
        reference = secrets.token_urlsafe(32)
        record = SessionRecord(data=dict(data), expires_at=self._clock() + ttl_seconds)
        with self._lock:
            self._records[reference] = record
        return reference

    def get(self, reference: str) -> dict[str, Any] | None:
        """Return a copy of the stored data, or None if missing or expired."""
        with self._lock:
            record = self._records.get(reference)
            if record is None:
                return None
            if record.expires_at <= self._clock():
                del self._records[reference]
                return None
            return dict(record.data)

    def delete(self, reference: str) -> bool:
        """Remove reference; True if it was present."""
        with self._lock:
            return self._records.pop(reference, None) is not None

    def purge_expired(self) -> int:
        """Drop every expired entry; return how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [ref for ref, rec in self._records.items() if rec.expires_at <= now]
            for ref in expired:
                del self._records[ref]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
