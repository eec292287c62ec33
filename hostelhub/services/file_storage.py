"""
Floor plan image storage.

Uploads floor plan images to an S3-compatible bucket and builds the public
URL the pages link to. Works against MinIO in development.
"""

import hashlib
import logging
import mimetypes
import re
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from hostelhub.config import Settings, get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class StorageNotConfiguredError(RuntimeError):
    """S3 credentials are missing."""


class FileStorageService:
    """Service for S3-compatible image storage."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    @asynccontextmanager
    async def get_client(self) -> "AsyncGenerator[Any, None]":
        """
        Get S3 client context manager.

        Raises:
            StorageNotConfiguredError: If S3 storage is not configured
        """
        if not self.settings.s3_configured:
            raise StorageNotConfiguredError(
                "S3 storage not configured. "
                "Set HOSTELHUB_S3_ACCESS_KEY and HOSTELHUB_S3_SECRET_KEY environment variables."
            )

        from aiobotocore.session import get_session

        session = get_session()
        async with session.create_client(
            "s3",
            endpoint_url=self.settings.s3_endpoint,
            aws_access_key_id=self.settings.s3_access_key,
            aws_secret_access_key=self.settings.s3_secret_key,
            region_name=self.settings.s3_region,
        ) as client:
            yield client

    @staticmethod
    def compute_hash(content: bytes) -> str:
        """Hex-encoded SHA-256 of the content."""
        return hashlib.sha256(content).hexdigest()

    @staticmethod
    def guess_content_type(filename: str) -> str:
        """
        Guess content type from filename.

        Returns:
            MIME type string (defaults to 'application/octet-stream' if unknown)
        """
        content_type, _ = mimetypes.guess_type(filename)
        return content_type or "application/octet-stream"

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Strip directories and characters that don't belong in an object key."""
        name = filename.replace("\\", "/").rsplit("/", 1)[-1]
        name = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("._")
        return name or "image"

    def generate_s3_key(self, hostel_id: int, floor_id: int, content: bytes, filename: str) -> str:
        """
        Build the object key for a floor plan image.

        Format: floor-plans/{hostel_id}/{floor_id}/{sha256[:16]}-{filename}

        The content hash prefix keeps re-uploads of a changed image from
        being served stale from caches.
        """
        digest = self.compute_hash(content)[:16]
        return f"floor-plans/{hostel_id}/{floor_id}/{digest}-{self.sanitize_filename(filename)}"

    def public_url(self, s3_key: str) -> str:
        """Path-style public URL for an object."""
        base = (self.settings.s3_public_endpoint or self.settings.s3_endpoint).rstrip("/")
        return f"{base}/{self.settings.s3_bucket}/{s3_key}"

    async def upload_file(
        self,
        s3_key: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> bool:
        """
        Upload file content to S3.

        Returns:
            True if upload was successful

        Raises:
            StorageNotConfiguredError: If S3 storage is not configured
        """
        if not self.settings.s3_configured:
            raise StorageNotConfiguredError("S3 storage not configured")

        try:
            async with self.get_client() as s3:
                await s3.put_object(
                    Bucket=self.settings.s3_bucket,
                    Key=s3_key,
                    Body=content,
                    ContentType=content_type,
                )
            logger.info(f"Uploaded file to S3: {s3_key} ({len(content)} bytes)")
            return True
        except Exception as e:
            logger.error(f"Failed to upload file to S3: {s3_key}, error: {e}")
            return False


# Module-level singleton for convenience
_file_storage_service: FileStorageService | None = None


def get_file_storage_service() -> FileStorageService:
    """Get the file storage service singleton."""
    global _file_storage_service
    if _file_storage_service is None:
        _file_storage_service = FileStorageService()
    return _file_storage_service


def reset_file_storage_service() -> None:
    """Reset the file storage service (for testing)."""
    global _file_storage_service
    _file_storage_service = None
