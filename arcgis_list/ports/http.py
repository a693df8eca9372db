"""HTTP transport port - Injectable GET capability.

Providers build URLs and parse bodies; fetching the body is delegated to
a transport so that tests and callers can swap the network layer.
"""

from __future__ import annotations

from typing import Optional, Protocol


class HttpTransportPort(Protocol):
    """Port for fetching a URL.

    Implementations:
    - adapters/http/geopy_transport.py (GeopyHttpTransport) - Production
    - adapters/http/static_transport.py (StaticHttpTransport) - Testing
    """

    def get_text(self, url: str, timeout: Optional[float] = None) -> str:
        """Issue a GET request and return the response body.

        Args:
            url: Fully built URL, query string included.
            timeout: Seconds to wait, or None for the transport default.

        Returns:
            The decoded response body.

        Raises:
            TransportError: On network, TLS or non-2xx status failures.
        """
        ...
