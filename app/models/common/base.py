"""Base classes for entities and normalized documents."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


@dataclass
class BaseEntity:
    """Base class for plain internal records."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)


class Document(BaseModel):
    """Immutable JSON-shaped value; a refresh builds a new one."""

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dump, as stored in the cache."""
        return self.model_dump(mode="json")


def utc_now_iso() -> str:
    """Current UTC time, ISO-8601 with ``Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
