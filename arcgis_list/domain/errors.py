"""Typed errors for the ArcGIS list geocoder.

Every failure the provider can report is one of these types, so callers
can tell a caller mistake (InvalidInput) from a capability mismatch
(UnsupportedOperation) and from a remote problem (ServerResponseInvalid).

All errors inherit from GeocoderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInput(GeocoderError):
    """The query cannot be sent (empty address, non-positive limit)."""


@dataclass
class UnsupportedOperation(GeocoderError):
    """The provider does not offer the requested capability.

    Raised for IP-address input and for every reverse geocoding call.

    Attributes:
        operation: Name of the rejected operation
    """

    operation: str = ""


@dataclass
class TransportError(GeocoderError):
    """The HTTP transport could not fetch a body.

    Transports raise this; the provider turns it into ServerResponseInvalid.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code, when a response was received
    """

    url: str = ""
    status_code: Optional[int] = None


@dataclass
class ServerResponseInvalid(GeocoderError):
    """The geocoding service did not return a usable response.

    Attributes:
        url: The requested URL, with credentials redacted
        status_code: HTTP status code, when the transport reported one
    """

    url: str = ""
    status_code: Optional[int] = None


@dataclass
class ConfigurationError(GeocoderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class CollectionIsEmpty(GeocoderError):
    """first() was called on an empty address collection."""


@dataclass
class OutOfBounds(GeocoderError):
    """An address collection index does not exist.

    Attributes:
        index: The requested index
    """

    index: int = 0
