"""Adapters layer - Concrete implementations of the ports.

- geocoding: providers implementing GeocodingProviderPort
- http: transports implementing HttpTransportPort
"""
