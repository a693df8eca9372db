"""HTTP adapters - Implementations of HttpTransportPort.

Available implementations:
- GeopyHttpTransport: geopy/requests based transport
- StaticHttpTransport: Canned responses for testing
"""

from .geopy_transport import GeopyHttpTransport
from .static_transport import StaticHttpTransport

__all__ = ["GeopyHttpTransport", "StaticHttpTransport"]
