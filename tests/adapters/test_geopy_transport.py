"""Tests for the geopy-backed HTTP transport."""

import threading
import time
from unittest.mock import MagicMock, patch

import pytest
from geopy.adapters import AdapterHTTPError
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable

from arcgis_list.adapters.http import GeopyHttpTransport
from arcgis_list.config import HttpConfig
from arcgis_list.domain.errors import TransportError

URL = "https://geocode.arcgis.com/arcgis/rest/services/World/GeocodeServer/geocodeAddresses?f=json"


@pytest.fixture
def http_config():
    return HttpConfig(timeout_seconds=7.0, user_agent="test-agent")


@pytest.fixture
def mock_adapter():
    adapter = MagicMock()
    adapter.get_text.return_value = '{"locations": []}'
    return adapter


class TestGeopyHttpTransport:
    """Test suite for GeopyHttpTransport."""

    def test_returns_body(self, http_config, mock_adapter):
        transport = GeopyHttpTransport(http_config, mock_adapter)

        assert transport.get_text(URL) == '{"locations": []}'

    def test_uses_configured_timeout_and_user_agent(self, http_config, mock_adapter):
        transport = GeopyHttpTransport(http_config, mock_adapter)

        transport.get_text(URL)

        mock_adapter.get_text.assert_called_once_with(
            URL, timeout=7.0, headers={"User-Agent": "test-agent"}
        )

    def test_per_call_timeout_overrides_config(self, http_config, mock_adapter):
        transport = GeopyHttpTransport(http_config, mock_adapter)

        transport.get_text(URL, timeout=1.5)

        assert mock_adapter.get_text.call_args.kwargs["timeout"] == 1.5

    def test_http_status_error_raises_transport_error(self, http_config, mock_adapter):
        """Non-2xx statuses keep their status code."""
        mock_adapter.get_text.side_effect = AdapterHTTPError(
            "Non-successful status code 498",
            status_code=498,
            headers={},
            text='{"error": {"code": 498, "message": "Invalid token."}}',
        )
        transport = GeopyHttpTransport(http_config, mock_adapter)

        with pytest.raises(TransportError) as exc_info:
            transport.get_text(URL)

        assert exc_info.value.status_code == 498
        assert exc_info.value.url == URL

    @pytest.mark.parametrize(
        "error",
        [
            GeocoderTimedOut("Service timed out"),
            GeocoderUnavailable("Connection refused"),
            GeocoderServiceError("SSL handshake failed"),
        ],
    )
    def test_network_errors_raise_transport_error(
        self, http_config, mock_adapter, error
    ):
        mock_adapter.get_text.side_effect = error
        transport = GeopyHttpTransport(http_config, mock_adapter)

        with pytest.raises(TransportError) as exc_info:
            transport.get_text(URL)

        assert exc_info.value.status_code is None
        assert exc_info.value.__cause__ is error

    def test_adapter_is_created_lazily_without_retries(self, http_config):
        """The requests adapter is built once, on first use."""
        with patch(
            "arcgis_list.adapters.http.geopy_transport.RequestsAdapter"
        ) as adapter_cls:
            adapter_cls.return_value.get_text.return_value = "{}"
            transport = GeopyHttpTransport(http_config)
            adapter_cls.assert_not_called()

            transport.get_text(URL)
            transport.get_text(URL)

            adapter_cls.assert_called_once_with(
                proxies=None, ssl_context=None, max_retries=0
            )

    def test_adapter_is_created_once_across_threads(self, http_config):
        """Concurrent first calls share a single requests adapter."""
        workers = 8
        barrier = threading.Barrier(workers)

        def build_adapter(**kwargs):
            time.sleep(0.05)
            adapter = MagicMock()
            adapter.get_text.return_value = "{}"
            return adapter

        with patch(
            "arcgis_list.adapters.http.geopy_transport.RequestsAdapter",
            side_effect=build_adapter,
        ) as adapter_cls:
            transport = GeopyHttpTransport(http_config)

            def fetch():
                barrier.wait()
                transport.get_text(URL)

            threads = [threading.Thread(target=fetch) for _ in range(workers)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            assert adapter_cls.call_count == 1
