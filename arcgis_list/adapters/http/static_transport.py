"""Static transport for testing.

Returns a canned body for every request and records the URLs it was
asked for, so tests can assert on the request without a network.

Example:
    transport = StaticHttpTransport(body='{"locations": []}')
    provider = ArcGISListGeocoderAdapter.with_token(transport, "secret")
    provider.lookup("10 Downing St")
    assert transport.requested_urls[0].endswith("&f=json")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.errors import TransportError


@dataclass
class StaticHttpTransport:
    """Canned-response transport implementing HttpTransportPort.

    Attributes:
        body: Body returned by every call
        error: If set, raised by every call instead of returning a body
        requested_urls: URLs received, in call order
        timeouts: Timeouts received, in call order
    """

    body: str = ""
    error: Optional[TransportError] = None
    requested_urls: List[str] = field(default_factory=list)
    timeouts: List[Optional[float]] = field(default_factory=list)

    def get_text(self, url: str, timeout: Optional[float] = None) -> str:
        self.requested_urls.append(url)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.body

    @property
    def call_count(self) -> int:
        return len(self.requested_urls)
