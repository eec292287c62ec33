"""
HTTP middleware.

Page view counting and CORS.
"""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from hostelhub.config import get_settings
from hostelhub.services.view_telemetry import ViewTelemetry, get_view_telemetry, should_track

logger = logging.getLogger(__name__)


class PageViewMiddleware(BaseHTTPMiddleware):
    """Count a page view for every tracked request before routing it."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if should_track(request.method, request.url.path):
            try:
                telemetry: ViewTelemetry = get_view_telemetry()
                await telemetry.record_page_view(request.url.path)
            except Exception as e:
                logger.error(f"Error tracking page view: {e}")

        return await call_next(request)


def register_middlewares(app: FastAPI) -> None:
    """Install the application's middleware stack."""
    settings = get_settings()

    app.add_middleware(PageViewMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
