"""Upstream failure taxonomy."""

from enum import StrEnum


class FailureKind(StrEnum):
    """Why an upstream call (or a whole refresh) produced no document."""

    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    NETWORK_TIMEOUT = "network_timeout"
    SERVER_ERROR = "server_error"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_CONFIGURED = "not_configured"

    @property
    def is_transient(self) -> bool:
        """Worth another attempt within the same refresh."""
        return self in (FailureKind.NETWORK_TIMEOUT, FailureKind.SERVER_ERROR)


class UpstreamError(Exception):
    """Base class for upstream failures."""

    kind: FailureKind = FailureKind.MALFORMED_RESPONSE

    def __init__(self, message: str, kind: FailureKind | None = None):
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)


class UpstreamUnavailable(UpstreamError):
    """Network error, timeout or 5xx."""

    kind = FailureKind.NETWORK_TIMEOUT


class UpstreamRejected(UpstreamError):
    """Auth failure, rate limit or missing resource."""

    kind = FailureKind.UNAUTHORIZED


class MalformedUpstreamResponse(UpstreamError):
    """Response did not match the expected schema."""

    kind = FailureKind.MALFORMED_RESPONSE


class NotConfigured(UpstreamError):
    """A required credential or identifier is missing."""

    kind = FailureKind.NOT_CONFIGURED


class CacheBackendUnavailable(Exception):
    """Cache backend could not be reached."""
