"""
Error values produced by the conversion steps.

Each step returns either its product or one of these; the route maps any
of them to an HTTP response with the ``{"error": ...}`` envelope.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ConversionError:
    """Base error value. ``http_status`` is what the caller receives."""

    message: str

    http_status: ClassVar[int] = 500

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_envelope(self) -> dict[str, str]:
        return {"error": self.message}


@dataclass(frozen=True)
class InvalidRequestError(ConversionError):
    """Inbound body is not JSON or lacks a string ``image`` field."""

    http_status: ClassVar[int] = 400


@dataclass(frozen=True)
class ConfigurationError(ConversionError):
    """Required credential missing; detected before any network call."""


@dataclass(frozen=True)
class UpstreamError(ConversionError):
    """Upstream answered with a non-success status or an unreadable body."""

    upstream_status: int = 0


@dataclass(frozen=True)
class TransportError(ConversionError):
    """Upstream could not be reached (DNS, connection, timeout)."""


Result = Union[T, ConversionError]
