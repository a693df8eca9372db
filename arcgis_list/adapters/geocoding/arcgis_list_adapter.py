"""ArcGIS World Geocoding Service adapter (geocodeAddresses endpoint).

The geocodeAddresses endpoint requires an authentication token for
service credits:
https://developers.arcgis.com/rest/geocode/api-reference/geocoding-geocode-addresses.htm

One address is sent per call. Matches are mapped to Address records in
the order the service returns them, then truncated to the query limit.
"""

from __future__ import annotations

import ipaddress
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from ...config import ArcGISConfig, get_config
from ...domain.errors import (
    ConfigurationError,
    InvalidInput,
    ServerResponseInvalid,
    TransportError,
    UnsupportedOperation,
)
from ...domain.models import (
    DEFAULT_LIMIT,
    Address,
    AddressCollection,
    AdminLevel,
    Coordinates,
    GeocodeQuery,
    ReverseQuery,
)
from ...ports.http import HttpTransportPort

PROVIDER_NAME = "arcgis_list"

ENDPOINT_URL = (
    "https://geocode.arcgis.com/arcgis/rest/services/World/GeocodeServer/"
    "geocodeAddresses?token={token}&addresses={address}"
)

# Attribute -> admin level, walked in this order.
ADMIN_LEVEL_ATTRIBUTES = (("Region", 1), ("Subregion", 2))

REDACTED = "***"


def _is_ip_address(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def _attribute(attributes: Dict[str, Any], key: str) -> Optional[str]:
    """Return an attribute value, or None when absent, null or empty."""
    value = attributes.get(key)
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


@dataclass
class ArcGISListGeocoderAdapter:
    """Forward geocoder for the ArcGIS World Geocoding Service.

    Implements GeocodingProviderPort. Reverse geocoding is not offered
    by this endpoint and always raises UnsupportedOperation.

    Attributes:
        transport: HTTP transport used for the single GET per call
        config: Token and optional country bias
    """

    transport: HttpTransportPort
    config: ArcGISConfig = field(default_factory=lambda: get_config().arcgis)

    _token: str = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        token = self.config.token
        if token is None or not token.get_secret_value():
            raise ConfigurationError(
                "An ArcGIS authentication token is required.",
                setting_name="ARCGIS_TOKEN",
            )
        self._token = token.get_secret_value()

    @classmethod
    def with_token(
        cls,
        transport: HttpTransportPort,
        token: str,
        source_country: Optional[str] = None,
    ) -> ArcGISListGeocoderAdapter:
        """Build an adapter from an explicit token and country bias."""
        return cls(
            transport=transport,
            config=ArcGISConfig(token=token, source_country=source_country),
        )

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def lookup(
        self,
        text: str,
        limit: int = DEFAULT_LIMIT,
        timeout: Optional[float] = None,
    ) -> AddressCollection:
        """Geocode a free-text address.

        Shortcut for geocode(GeocodeQuery(text, limit)).
        """
        return self.geocode(GeocodeQuery(text=text, limit=limit), timeout=timeout)

    def geocode(
        self, query: GeocodeQuery, timeout: Optional[float] = None
    ) -> AddressCollection:
        """Geocode a street address.

        Args:
            query: The address and the maximum number of results.
            timeout: Optional transport timeout for this call, in seconds.

        Returns:
            At most query.limit addresses, in service order.

        Raises:
            InvalidInput: If the address is empty.
            UnsupportedOperation: If the address is an IP literal.
            ServerResponseInvalid: If the service cannot be reached or
                its response cannot be understood.
        """
        text = query.text.strip()
        # Checked before the request so no service credit is spent.
        if not text:
            raise InvalidInput("Address cannot be empty.")
        if _is_ip_address(text):
            raise UnsupportedOperation(
                "The ArcGISList provider does not support IP addresses, "
                "only street addresses.",
                operation="geocode",
            )

        url = self.build_url(query.text)
        safe_url = self._format_url(query.text, REDACTED)
        payload = self._execute_query(url, safe_url, timeout)

        locations = payload.get("locations")
        if not locations:
            self._logger.debug(
                "Geocode returned no result", extra={"query": query.text}
            )
            return AddressCollection()

        if not isinstance(locations, list):
            raise self._invalid_response(safe_url, "'locations' is not a list")

        addresses: List[Address] = []
        for location in locations[: query.limit]:
            addresses.append(self._to_address(location, safe_url))

        self._logger.debug(
            "Geocode success",
            extra={
                "query": query.text,
                "matches": len(locations),
                "returned": len(addresses),
            },
        )
        return AddressCollection(tuple(addresses))

    def reverse_geocode(self, query: ReverseQuery) -> AddressCollection:
        """Not supported by the geocodeAddresses endpoint.

        Raises:
            UnsupportedOperation: Always.
        """
        raise UnsupportedOperation(
            "The ArcGISList provider does not support reverse geocoding.",
            operation="reverse_geocode",
        )

    def build_url(self, address: str) -> str:
        """Build the request URL for ``address``.

        The country bias is only added when configured, and the output
        format is always the last parameter.
        """
        return self._format_url(address, self._token)

    def _format_url(self, address: str, token: str) -> str:
        url = ENDPOINT_URL.format(token=token, address=quote_plus(address))
        if self.config.source_country is not None:
            url = f"{url}&sourceCountry={self.config.source_country}"
        return f"{url}&f=json"

    def redact(self, text: str) -> str:
        """Replace the token in free text (e.g. an HTTP library message)."""
        return text.replace(self._token, REDACTED)

    def _execute_query(
        self, url: str, safe_url: str, timeout: Optional[float]
    ) -> Dict[str, Any]:
        self._logger.debug("Geocode request", extra={"url": safe_url})

        try:
            content = self.transport.get_text(url, timeout=timeout)
        except TransportError as e:
            # HTTP library messages may quote the full URL, token included.
            cause = TransportError(
                self.redact(e.message),
                url=safe_url,
                status_code=e.status_code,
            )
            self._logger.warning(
                "Geocode transport error",
                extra={
                    "url": safe_url,
                    "status_code": e.status_code,
                    "error": cause.message,
                },
            )
            raise ServerResponseInvalid(
                f"Could not execute query {safe_url}",
                url=safe_url,
                status_code=e.status_code,
            ) from cause

        try:
            payload = json.loads(content)
        except (TypeError, ValueError) as e:
            raise self._invalid_response(safe_url, "body is not valid JSON") from e

        if not isinstance(payload, dict):
            raise self._invalid_response(safe_url, "body is not a JSON object")
        return payload

    def _to_address(self, location: Any, safe_url: str) -> Address:
        try:
            feature = location["feature"]
            geometry = feature["geometry"]
            coordinates = Coordinates(
                latitude=float(geometry["y"]),
                longitude=float(geometry["x"]),
            )
            attributes = feature.get("attributes") or {}
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise self._invalid_response(safe_url, f"malformed location: {e}") from e
        if not isinstance(attributes, dict):
            raise self._invalid_response(safe_url, "malformed location: attributes")

        admin_levels = []
        for key, level in ADMIN_LEVEL_ATTRIBUTES:
            admin_name = _attribute(attributes, key)
            if admin_name is not None:
                admin_levels.append(AdminLevel(name=admin_name, level=level))

        return Address(
            provided_by=self.name,
            coordinates=coordinates,
            street_number=_attribute(attributes, "AddNum"),
            street_name=_attribute(attributes, "StAddr"),
            locality=_attribute(attributes, "City"),
            postal_code=_attribute(attributes, "Postal"),
            country_code=_attribute(attributes, "Country"),
            admin_levels=tuple(admin_levels),
        )

    def _invalid_response(self, safe_url: str, reason: str) -> ServerResponseInvalid:
        self._logger.warning(
            "Geocode invalid response", extra={"url": safe_url, "reason": reason}
        )
        return ServerResponseInvalid(
            f"Invalid server response for {safe_url} ({reason})", url=safe_url
        )
