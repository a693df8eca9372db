"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the provider logic and the
collaborators it drives. They enable dependency injection and make
the adapters testable without a network.
"""

from .geocoding import GeocodingProviderPort
from .http import HttpTransportPort

__all__ = ["GeocodingProviderPort", "HttpTransportPort"]
