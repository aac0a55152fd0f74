"""Cache records and the explicit absence marker."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from app.models.common.base import BaseEntity
from stats_client.errors import FailureKind

CACHE_PREFIX = "stats:"


@dataclass
class CachedEntry(BaseEntity):
    """Serialized document with its expiry, as held by the in-process backend."""

    key: str
    value: str
    expires_at: datetime | None = None

    @classmethod
    def create(cls, key: str, value: str, ttl: int | None) -> "CachedEntry":
        expires_at = datetime.now(UTC) + timedelta(seconds=ttl) if ttl else None
        return cls(key=key, value=value, expires_at=expires_at)

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(UTC)) >= self.expires_at


@dataclass
class Unavailable(BaseEntity):
    """A provider has no document to serve - neither fresh nor cached."""

    provider: str
    reason: FailureKind
    hint: str = ""

    def __bool__(self) -> bool:
        return False
