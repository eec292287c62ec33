"""
Speed Test Router

Runs the throughput probe on demand. The request stays open until both
measurements finish (bounded by the probe timeout).
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from hostelhub.config import get_settings
from hostelhub.models.contracts.speedtest import SpeedTestErrorResponse, SpeedTestResponse
from hostelhub.services.throughput_probe import ThroughputProbeDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["speedtest"])


@router.get(
    "/speedtest",
    response_model=SpeedTestResponse,
    responses={500: {"model": SpeedTestErrorResponse}},
)
async def run_speed_test(probe: ThroughputProbeDep) -> SpeedTestResponse | JSONResponse:
    """
    Measure download and upload bandwidth.

    Returns:
        Download and upload speed in Mbps
    """
    settings = get_settings()
    logger.info("Running speed test via API...")

    try:
        result = await probe.run(
            download_bytes=settings.probe_download_bytes,
            upload_bytes=settings.probe_upload_bytes,
            concurrent=settings.probe_concurrent,
        )
    except Exception as e:
        logger.error(f"Speed test failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SpeedTestErrorResponse(error="Speed test failed").model_dump(by_alias=True),
        )

    logger.info(
        f"Speed test completed - Download: {result.download_mbps} Mbps, "
        f"Upload: {result.upload_mbps} Mbps"
    )
    return SpeedTestResponse(
        download_speed=result.download_mbps,
        upload_speed=result.upload_mbps,
    )
