"""
Throughput Probe Service

Estimates download and upload bandwidth by timing fixed-size transfers
against a remote echo service (Cloudflare's speed endpoints by default):

- GET  <base>/__down?bytes=N  streams N bytes back
- POST <base>/__up            accepts an octet-stream body

Measurements never raise. Transport errors and timeouts are logged and
reported as 0.0 Mbps.
"""

import asyncio
import logging
import os
import time
from dataclasses import dataclass
from typing import Annotated

import httpx
from fastapi import Depends

from hostelhub.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_BYTES = 25_000_000
DEFAULT_UPLOAD_BYTES = 10_000_000


@dataclass
class ThroughputResult:
    """Download and upload rates in megabits per second."""

    download_mbps: float
    upload_mbps: float


def calculate_mbps(byte_count: int, seconds: float) -> float:
    """
    Convert a transfer into megabits per second.

    Args:
        byte_count: Number of bytes transferred
        seconds: Transfer duration in seconds

    Returns:
        Rate rounded to two decimals (0.0 for a zero or negative duration)
    """
    if seconds <= 0:
        return 0.0
    return round(byte_count * 8 / seconds / 1_000_000, 2)


class ThroughputProbe:
    """Times transfers against the echo service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the probe.

        Args:
            base_url: Echo service base URL
            timeout_seconds: Deadline for each measurement
            transport: Optional httpx transport (for testing)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout_seconds),
            transport=self._transport,
        )

    async def measure_download(self, byte_count: int = DEFAULT_DOWNLOAD_BYTES) -> float:
        """
        Measure download bandwidth.

        The timer starts right before the request goes out and stops once the
        whole body has been drained, not when headers arrive.

        Args:
            byte_count: Number of bytes to request

        Returns:
            Download rate in Mbps, 0.0 on failure
        """
        if byte_count <= 0:
            return 0.0

        logger.info(f"Testing download with {byte_count / 1_000_000} MB...")
        try:
            elapsed = await asyncio.wait_for(
                self._timed_download(byte_count), timeout=self.timeout_seconds
            )
        except Exception as e:
            logger.error(f"Download test failed: {e!r}")
            return 0.0

        logger.info(f"Download finished in {elapsed:.2f} seconds.")
        return calculate_mbps(byte_count, elapsed)

    async def _timed_download(self, byte_count: int) -> float:
        async with self._client() as client:
            start = time.perf_counter()
            async with client.stream("GET", "/__down", params={"bytes": byte_count}) as response:
                response.raise_for_status()
                async for _ in response.aiter_bytes():
                    pass
            return time.perf_counter() - start

    async def measure_upload(self, byte_count: int = DEFAULT_UPLOAD_BYTES) -> float:
        """
        Measure upload bandwidth.

        Sends random bytes so that no layer can compress the payload.

        Args:
            byte_count: Number of bytes to send

        Returns:
            Upload rate in Mbps, 0.0 on failure
        """
        if byte_count <= 0:
            return 0.0

        logger.info(f"Testing upload with {byte_count / 1_000_000} MB...")
        payload = os.urandom(byte_count)
        try:
            elapsed = await asyncio.wait_for(
                self._timed_upload(payload), timeout=self.timeout_seconds
            )
        except Exception as e:
            logger.error(f"Upload test failed: {e!r}")
            return 0.0

        logger.info(f"Upload finished in {elapsed:.2f} seconds.")
        return calculate_mbps(byte_count, elapsed)

    async def _timed_upload(self, payload: bytes) -> float:
        async with self._client() as client:
            start = time.perf_counter()
            response = await client.post(
                "/__up",
                content=payload,
                headers={"Content-Type": "application/octet-stream"},
            )
            response.raise_for_status()
            return time.perf_counter() - start

    async def run(
        self,
        download_bytes: int = DEFAULT_DOWNLOAD_BYTES,
        upload_bytes: int = DEFAULT_UPLOAD_BYTES,
        concurrent: bool = False,
    ) -> ThroughputResult:
        """
        Run both measurements.

        Args:
            download_bytes: Download payload size
            upload_bytes: Upload payload size
            concurrent: Run both transfers at once instead of one after the other

        Returns:
            ThroughputResult with both rates
        """
        if concurrent:
            download, upload = await asyncio.gather(
                self.measure_download(download_bytes),
                self.measure_upload(upload_bytes),
            )
        else:
            download = await self.measure_download(download_bytes)
            upload = await self.measure_upload(upload_bytes)

        return ThroughputResult(download_mbps=download, upload_mbps=upload)


def get_throughput_probe() -> ThroughputProbe:
    """Dependency for getting a probe configured from settings."""
    settings = get_settings()
    return ThroughputProbe(
        base_url=settings.probe_base_url,
        timeout_seconds=settings.probe_timeout_seconds,
    )


# Type alias for dependency injection
ThroughputProbeDep = Annotated[ThroughputProbe, Depends(get_throughput_probe)]
