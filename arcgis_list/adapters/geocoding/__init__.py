"""Geocoding adapters - Implementations of GeocodingProviderPort.

Available implementations:
- ArcGISListGeocoderAdapter: ArcGIS World Geocoding Service (geocodeAddresses)
"""

from .arcgis_list_adapter import PROVIDER_NAME, ArcGISListGeocoderAdapter

__all__ = ["ArcGISListGeocoderAdapter", "PROVIDER_NAME"]
