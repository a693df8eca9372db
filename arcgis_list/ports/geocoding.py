"""Geocoding port - Abstraction for address lookup providers.

This protocol defines the contract every geocoding provider fulfils,
allowing different backends to be plugged in behind the same calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import AddressCollection, GeocodeQuery, ReverseQuery


class GeocodingProviderPort(Protocol):
    """Port for geocoding providers.

    Implementation: adapters/geocoding/arcgis_list_adapter.py
    """

    @property
    def name(self) -> str:
        """Stable identifier of the provider (e.g., 'arcgis_list')."""
        ...

    def geocode(
        self, query: GeocodeQuery, timeout: Optional[float] = None
    ) -> AddressCollection:
        """Resolve a free-text address to matching addresses.

        Args:
            query: The address and the maximum number of results.
            timeout: Optional transport timeout for this call, in seconds.

        Returns:
            Matching addresses in provider order, possibly empty.
        """
        ...

    def reverse_geocode(self, query: ReverseQuery) -> AddressCollection:
        """Resolve coordinates to matching addresses.

        Args:
            query: The coordinates to look up.

        Returns:
            Matching addresses in provider order, possibly empty.
        """
        ...
