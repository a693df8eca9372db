"""Immutable domain models for the ArcGIS list geocoder.

All models are frozen dataclasses with slots. They have no external
dependencies and describe queries going in and normalized addresses
coming out of a geocoding provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from .errors import CollectionIsEmpty, InvalidInput, OutOfBounds

DEFAULT_LIMIT = 5


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS coordinates of a matched location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class AdminLevel:
    """An administrative division attached to an address.

    Attributes:
        name: Division name as returned by the provider (e.g., 'Illinois')
        level: Tier of the division, 1 being the broadest
    """

    name: str
    level: int

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Admin level must be >= 1, got {self.level}")


@dataclass(frozen=True, slots=True)
class Address:
    """A normalized address produced by a geocoding provider.

    Attributes:
        provided_by: Name of the provider that produced the address
        coordinates: Location of the match
        street_number: House number, if known
        street_name: Street name, if known
        locality: City or town, if known
        postal_code: Postal code, if known
        country_code: Country code, if known
        admin_levels: Administrative divisions, broadest first
    """

    provided_by: str
    coordinates: Coordinates
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    locality: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    admin_levels: tuple[AdminLevel, ...] = field(default_factory=tuple)

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    def to_dict(self) -> Dict[str, Any]:
        """Return the address as a plain dictionary with camelCase keys."""
        return {
            "providedBy": self.provided_by,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "locality": self.locality,
            "postalCode": self.postal_code,
            "countryCode": self.country_code,
            "adminLevels": [
                {"name": admin.name, "level": admin.level}
                for admin in self.admin_levels
            ],
        }


@dataclass(frozen=True, slots=True)
class AddressCollection:
    """Ordered, immutable result of a geocoding call.

    The order is the one returned by the provider.
    """

    addresses: tuple[Address, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    def __len__(self) -> int:
        return len(self.addresses)

    def __getitem__(self, index: int) -> Address:
        return self.addresses[index]

    def is_empty(self) -> bool:
        return len(self.addresses) == 0

    def first(self) -> Address:
        """Return the best (first) match.

        Raises:
            CollectionIsEmpty: If the collection holds no address.
        """
        if self.is_empty():
            raise CollectionIsEmpty("The address collection is empty.")
        return self.addresses[0]

    def has(self, index: int) -> bool:
        return 0 <= index < len(self.addresses)

    def get(self, index: int) -> Address:
        """Return the address at ``index``.

        Raises:
            OutOfBounds: If there is no address at that index.
        """
        if not self.has(index):
            raise OutOfBounds(f"Index {index} does not exist.", index=index)
        return self.addresses[index]

    def slice(self, offset: int, length: Optional[int] = None) -> tuple[Address, ...]:
        """Return ``length`` addresses starting at ``offset`` (all if None)."""
        if length is None:
            return self.addresses[offset:]
        return self.addresses[offset : offset + length]

    def all(self) -> tuple[Address, ...]:
        return self.addresses


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """A forward geocoding request.

    The text is validated by the provider rather than here, so that an
    empty address is reported by the component that would have billed a
    request for it.

    Attributes:
        text: Free-form street address
        limit: Maximum number of addresses to return
    """

    text: str
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise InvalidInput(f"Limit must be a positive integer, got {self.limit}.")


@dataclass(frozen=True, slots=True)
class ReverseQuery:
    """A reverse geocoding request.

    Attributes:
        coordinates: Location to resolve
        limit: Maximum number of addresses to return
    """

    coordinates: Coordinates
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise InvalidInput(f"Limit must be a positive integer, got {self.limit}.")
