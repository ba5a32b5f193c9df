"""
Images API Routes (Admin)

- POST /upload - Upload vehicle photos to the image host
"""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from typing import List

from app.adapters.image_host_adapter_interface import ImageHostError
from app.schemas.vehicle import ImageUploadResponseSchema
from app.services.fleet_service import FleetService, ImageFile, get_fleet_service

router = APIRouter()


@router.post(
    "/upload",
    response_model=ImageUploadResponseSchema,
    summary="Upload vehicle images",
    description="Files are uploaded one by one. Refused files are counted in `failed`; nothing is rolled back."
)
async def upload_images(
    files: List[UploadFile] = File(...),
    service: FleetService = Depends(get_fleet_service)
):
    images = []
    for upload in files:
        images.append(ImageFile(
            filename=upload.filename or "image",
            content=await upload.read(),
            content_type=upload.content_type or "application/octet-stream"
        ))

    try:
        return await service.upload_images(images)
    except ImageHostError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error uploading images"
        )
