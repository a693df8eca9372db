"""ArcGIS World Geocoding Service provider.

Turns a free-text street address into normalized Address records using
the ArcGIS geocodeAddresses endpoint.

    transport = GeopyHttpTransport()
    provider = ArcGISListGeocoderAdapter.with_token(transport, "<token>", "USA")
    for address in provider.lookup("380 New York St, Redlands, CA", limit=1):
        print(address.latitude, address.longitude, address.locality)
"""

from .adapters.geocoding import ArcGISListGeocoderAdapter
from .adapters.http import GeopyHttpTransport, StaticHttpTransport
from .domain import (
    Address,
    AddressCollection,
    AdminLevel,
    Coordinates,
    GeocodeQuery,
    GeocoderError,
    InvalidInput,
    ReverseQuery,
    ServerResponseInvalid,
    UnsupportedOperation,
)

__all__ = [
    "ArcGISListGeocoderAdapter",
    "GeopyHttpTransport",
    "StaticHttpTransport",
    "Address",
    "AddressCollection",
    "AdminLevel",
    "Coordinates",
    "GeocodeQuery",
    "ReverseQuery",
    "GeocoderError",
    "InvalidInput",
    "UnsupportedOperation",
    "ServerResponseInvalid",
]
