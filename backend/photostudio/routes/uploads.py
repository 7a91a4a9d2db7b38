"""
PhotoStudio Backend — Image Upload Route Handler
==================================================

What:  POST /api/upload-image — multipart upload (field `image`) passed
       through to the image host.
How:   The file is read into memory (bounded by the size check in
       ImageHostService) and the resulting durable URL is returned.

Responses:
    200 {"image_url": ...}
    400 no file / unsupported type / too large
    401 image host rejected our credentials
    500 image host failure or not configured
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from photostudio.exceptions import ValidationError
from photostudio.routes.deps import get_image_host
from photostudio.schemas.common import ErrorResponse, ImageUploadResponse
from photostudio.services.image_host import ImageHostService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Uploads"])


@router.post(
    "/upload-image",
    response_model=ImageUploadResponse,
    responses={
        400: {"description": "No image or invalid image", "model": ErrorResponse},
        401: {"description": "Image host authentication failed", "model": ErrorResponse},
        500: {"description": "Image host failure", "model": ErrorResponse},
    },
    summary="Upload an image to the image host",
)
async def upload_image(
    image: Optional[UploadFile] = File(None, description="Image file (png, jpg, jpeg, gif, webp)"),
    image_host: ImageHostService = Depends(get_image_host),
) -> ImageUploadResponse:
    if image is None:
        raise ValidationError(message="No image file provided.", field="image")

    try:
        content = await image.read()
        logger.info(
            "Received image upload: filename=%s, size=%d bytes",
            image.filename or "unknown",
            len(content),
        )
        url = await image_host.upload(
            filename=image.filename or "",
            content=content,
            content_type=image.content_type,
        )
    finally:
        await image.close()

    return ImageUploadResponse(image_url=url)
