"""
Unit tests for floor plan image storage.

The S3 client is mocked; no bucket is touched.
"""

import hashlib
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from hostelhub.services.file_storage import (
    FileStorageService,
    StorageNotConfiguredError,
    get_file_storage_service,
    reset_file_storage_service,
)


@pytest.fixture(autouse=True)
def reset_service():
    """Reset file storage service singleton before each test."""
    reset_file_storage_service()
    yield
    reset_file_storage_service()


@pytest.fixture
def mock_settings():
    """Create mock settings for testing."""
    settings = MagicMock()
    settings.s3_configured = True
    settings.s3_endpoint = "http://localhost:9000"
    settings.s3_public_endpoint = None
    settings.s3_access_key = "test-access-key"
    settings.s3_secret_key = "test-secret-key"
    settings.s3_region = "us-east-1"
    settings.s3_bucket = "test-bucket"
    return settings


@pytest.fixture
def file_storage_service(mock_settings):
    """Create file storage service with mock settings."""
    return FileStorageService(settings=mock_settings)


def _mock_session(s3_client):
    session = MagicMock()
    session.create_client.return_value.__aenter__ = AsyncMock(return_value=s3_client)
    session.create_client.return_value.__aexit__ = AsyncMock(return_value=None)
    return session


@pytest.mark.unit
class TestKeysAndUrls:
    """Tests for key and URL construction."""

    def test_generate_s3_key(self, file_storage_service):
        content = b"floor plan bytes"
        digest = hashlib.sha256(content).hexdigest()[:16]

        s3_key = file_storage_service.generate_s3_key(3, 12, content, "ground floor.png")

        assert s3_key == f"floor-plans/3/12/{digest}-ground_floor.png"

    def test_sanitize_filename_strips_directories(self):
        assert FileStorageService.sanitize_filename("../../etc/passwd") == "passwd"
        assert FileStorageService.sanitize_filename("C:\\Users\\me\\plan.jpg") == "plan.jpg"
        assert FileStorageService.sanitize_filename("...") == "image"

    def test_public_url_uses_endpoint(self, file_storage_service):
        url = file_storage_service.public_url("floor-plans/1/2/abc-plan.png")

        assert url == "http://localhost:9000/test-bucket/floor-plans/1/2/abc-plan.png"

    def test_public_url_prefers_public_endpoint(self, file_storage_service, mock_settings):
        mock_settings.s3_public_endpoint = "https://cdn.example.com/"

        url = file_storage_service.public_url("k.png")

        assert url == "https://cdn.example.com/test-bucket/k.png"

    def test_guess_content_type(self):
        assert FileStorageService.guess_content_type("plan.png") == "image/png"
        assert FileStorageService.guess_content_type("plan.unknown") == "application/octet-stream"


@pytest.mark.unit
class TestUpload:
    """Tests for uploading to S3."""

    async def test_upload_file(self, file_storage_service):
        s3_client = AsyncMock()

        with patch("aiobotocore.session.get_session", return_value=_mock_session(s3_client)):
            ok = await file_storage_service.upload_file("k.png", b"data", "image/png")

        assert ok is True
        s3_client.put_object.assert_awaited_once_with(
            Bucket="test-bucket",
            Key="k.png",
            Body=b"data",
            ContentType="image/png",
        )

    async def test_upload_failure_returns_false(self, file_storage_service):
        s3_client = AsyncMock()
        s3_client.put_object = AsyncMock(side_effect=Exception("bucket missing"))

        with patch("aiobotocore.session.get_session", return_value=_mock_session(s3_client)):
            ok = await file_storage_service.upload_file("k.png", b"data", "image/png")

        assert ok is False

    async def test_upload_without_credentials_raises(self, file_storage_service, mock_settings):
        mock_settings.s3_configured = False

        with pytest.raises(StorageNotConfiguredError):
            await file_storage_service.upload_file("k.png", b"data")

    def test_singleton(self):
        assert get_file_storage_service() is get_file_storage_service()
