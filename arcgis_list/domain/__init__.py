"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    CollectionIsEmpty,
    ConfigurationError,
    GeocoderError,
    InvalidInput,
    OutOfBounds,
    ServerResponseInvalid,
    TransportError,
    UnsupportedOperation,
)
from .models import (
    DEFAULT_LIMIT,
    Address,
    AddressCollection,
    AdminLevel,
    Coordinates,
    GeocodeQuery,
    ReverseQuery,
)

__all__ = [
    # Models
    "DEFAULT_LIMIT",
    "Coordinates",
    "AdminLevel",
    "Address",
    "AddressCollection",
    "GeocodeQuery",
    "ReverseQuery",
    # Errors
    "GeocoderError",
    "InvalidInput",
    "UnsupportedOperation",
    "TransportError",
    "ServerResponseInvalid",
    "ConfigurationError",
    "CollectionIsEmpty",
    "OutOfBounds",
]
