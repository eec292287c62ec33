"""
Uploads Router

Floor plan image upload for signed-in users.
"""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from hostelhub.config import get_settings
from hostelhub.core.auth import CurrentUser
from hostelhub.core.database import DbSession
from hostelhub.models.contracts.upload import FloorPlanImageResponse
from hostelhub.repositories.floor_plan import FloorPlanRepository
from hostelhub.services.file_storage import StorageNotConfiguredError, get_file_storage_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/floor-plans", tags=["uploads"])


@router.post("/{floor_id}/image", response_model=FloorPlanImageResponse)
async def upload_floor_plan_image(
    floor_id: int,
    current_user: CurrentUser,
    db: DbSession,
    file: UploadFile = File(...),
) -> FloorPlanImageResponse:
    """
    Upload a floor plan image and attach it to the floor plan.

    Raises:
        HTTPException: 404 if the floor plan does not exist
        HTTPException: 400 if the file is not an image
        HTTPException: 413 if the file is too large
        HTTPException: 503 if storage is unavailable
    """
    repo = FloorPlanRepository(db)
    floor_plan = await repo.get_by_id(floor_id)
    if not floor_plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Floor plan not found",
        )

    storage = get_file_storage_service()
    filename = file.filename or "floor-plan"
    content_type = file.content_type or storage.guess_content_type(filename)
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only image uploads are accepted",
        )

    max_bytes = get_settings().max_upload_bytes
    content = await file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Image exceeds {max_bytes} bytes",
        )

    s3_key = storage.generate_s3_key(floor_plan.hostel_id, floor_id, content, filename)
    try:
        uploaded = await storage.upload_file(s3_key, content, content_type)
    except StorageNotConfiguredError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Image storage is not configured",
        ) from e

    if not uploaded:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Image upload failed",
        )

    floor_plan.image_url = storage.public_url(s3_key)
    await repo.update(floor_plan)

    logger.info(
        f"Floor plan image uploaded for floor {floor_id}",
        extra={"floor_id": floor_id, "uid": current_user.uid, "s3_key": s3_key},
    )
    return FloorPlanImageResponse(
        floor_id=floor_id,
        image_url=floor_plan.image_url,
        size_bytes=len(content),
    )
