"""
Integration tests for the speed test endpoint.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from hostelhub.main import app
from hostelhub.services.throughput_probe import (
    ThroughputProbe,
    ThroughputResult,
    get_throughput_probe,
)


@pytest.fixture
def override_probe():
    def _override(probe):
        app.dependency_overrides[get_throughput_probe] = lambda: probe

    yield _override
    app.dependency_overrides.pop(get_throughput_probe, None)


@pytest.mark.integration
class TestSpeedTest:
    """Tests for GET /api/speedtest."""

    async def test_success_envelope(self, client, override_probe):
        probe = MagicMock()
        probe.run = AsyncMock(return_value=ThroughputResult(download_mbps=95.5, upload_mbps=40.25))
        override_probe(probe)

        response = await client.get("/api/speedtest")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "downloadSpeed": 95.5,
            "uploadSpeed": 40.25,
            "unit": "Mbps",
        }

    async def test_failure_envelope(self, client, override_probe):
        probe = MagicMock()
        probe.run = AsyncMock(side_effect=RuntimeError("boom"))
        override_probe(probe)

        response = await client.get("/api/speedtest")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Speed test failed",
            "downloadSpeed": 0,
            "uploadSpeed": 0,
        }

    async def test_unreachable_echo_service_reports_zero(self, client, override_probe):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        override_probe(
            ThroughputProbe("https://speed.example.com", transport=httpx.MockTransport(handler))
        )

        response = await client.get("/api/speedtest")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["downloadSpeed"] == 0.0
        assert body["uploadSpeed"] == 0.0

    async def test_not_counted_as_page_view(self, client, override_probe, telemetry, fake_redis):
        probe = MagicMock()
        probe.run = AsyncMock(return_value=ThroughputResult(download_mbps=1.0, upload_mbps=1.0))
        override_probe(probe)

        with patch("hostelhub.core.middleware.get_view_telemetry", return_value=telemetry):
            await client.get("/api/speedtest")

        assert fake_redis.zsets == {}
