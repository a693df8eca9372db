"""HTTP transport backed by geopy's requests adapter.

geopy already ships a synchronous HTTP layer for geocoding services
(connection pooling, TLS context, proxy handling). This transport reuses
it to fetch raw bodies and translates its errors into TransportError.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from geopy.adapters import AdapterHTTPError, BaseSyncAdapter, RequestsAdapter
from geopy.exc import GeopyError

from ...config import HttpConfig, get_config
from ...domain.errors import TransportError


@dataclass
class GeopyHttpTransport:
    """Synchronous GET transport implementing HttpTransportPort.

    Retries are disabled on the underlying connection pool: one
    get_text() call is exactly one request on the wire.

    Attributes:
        config: HTTP configuration (timeout, user agent)
        adapter: Optional pre-built geopy adapter, created lazily otherwise
    """

    config: HttpConfig = field(default_factory=lambda: get_config().http)
    adapter: Optional[BaseSyncAdapter] = field(default=None, repr=False)

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_adapter(self) -> BaseSyncAdapter:
        """Get or initialize the geopy adapter."""
        if self.adapter is not None:
            return self.adapter
        with self._lock:
            if self.adapter is None:
                self._logger.debug(
                    "Initializing requests adapter",
                    extra={"timeout": self.config.timeout_seconds},
                )
                self.adapter = RequestsAdapter(
                    proxies=None,
                    ssl_context=None,
                    max_retries=0,
                )
            return self.adapter

    def get_text(self, url: str, timeout: Optional[float] = None) -> str:
        """Fetch ``url`` and return its body.

        Args:
            url: Fully built URL.
            timeout: Per-call timeout, defaults to config.timeout_seconds.

        Raises:
            TransportError: If the request fails or the status is not 2xx.
        """
        effective_timeout = (
            timeout if timeout is not None else self.config.timeout_seconds
        )
        adapter = self._get_adapter()

        try:
            return adapter.get_text(
                url,
                timeout=effective_timeout,
                headers={"User-Agent": self.config.user_agent},
            )
        except AdapterHTTPError as e:
            raise TransportError(
                f"Non-successful status code {e.status_code}",
                url=url,
                status_code=e.status_code,
            ) from e
        except GeopyError as e:
            raise TransportError(str(e) or type(e).__name__, url=url) from e
