"""
PhotoStudio Backend — Image Host Service (Cloudinary)
=======================================================

What:  Validates an uploaded image and passes it through to Cloudinary,
       returning the durable HTTPS URL.
How:   Cheap checks first (presence, extension, declared content type, size),
       then one upload call. The Cloudinary SDK is blocking, so the call runs
       in a worker thread and the event loop keeps serving other requests.
Who:   POST /api/upload-image. The returned URL is what clients store in a
       portfolio item's `image_url`.

Failure mapping:
    Missing file / bad type / too large → ValidationError (400)
    Credentials not configured          → IntegrationError (500)
    Cloudinary rejects credentials      → IntegrationError(auth_failure=True) (401)
    Any other upload failure            → IntegrationError (500)
"""

import asyncio
import io
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader

from photostudio.config import Settings
from photostudio.exceptions import IntegrationError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}


class ImageHostService:
    """
    Upload passthrough to Cloudinary.

    Args:
        settings: Supplies credentials, target folder, and the size limit.
    """

    def __init__(self, settings: Settings):
        self.folder = settings.cloudinary_folder
        self.max_size = settings.max_upload_size
        self.configured = settings.image_host_configured
        self._credentials: Dict[str, Any] = {
            "cloud_name": settings.cloudinary_cloud_name,
            "api_key": settings.cloudinary_api_key,
            "api_secret": settings.cloudinary_api_secret,
            "secure": True,
        }

    # ── Validation ────────────────────────────────────────────────────────

    def validate_extension(self, filename: str) -> str:
        """Returns the normalized extension; raises ValidationError if not an image type."""
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                message=(
                    f"File type '{ext or filename}' is not supported. "
                    f"Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
                ),
                field="image",
                context={"extension": ext, "allowed": sorted(ALLOWED_EXTENSIONS)},
            )
        return ext

    def validate_content_type(self, content_type: Optional[str]) -> None:
        # Browsers sometimes omit it; only a declared non-image type is rejected
        if content_type and not content_type.lower().startswith("image/"):
            raise ValidationError(
                message=f"Content type '{content_type}' is not an image.",
                field="image",
                context={"content_type": content_type},
            )

    def validate_size(self, size: int) -> None:
        if size == 0:
            raise ValidationError(message="The uploaded image is empty.", field="image")
        if size > self.max_size:
            max_mb = self.max_size / (1024 * 1024)
            raise ValidationError(
                message=(
                    f"File size ({size / (1024 * 1024):.1f}MB) exceeds "
                    f"maximum of {max_mb:.0f}MB."
                ),
                field="image",
                context={"max_size_mb": max_mb, "actual_size": size},
            )

    # ── Upload ────────────────────────────────────────────────────────────

    async def upload(
        self,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Validate and upload one image.

        Returns:
            The `secure_url` Cloudinary assigned to the stored image.
        """
        self.validate_extension(filename)
        self.validate_content_type(content_type)
        self.validate_size(len(content))

        if not self.configured:
            logger.error("Image upload requested but Cloudinary is not configured")
            raise IntegrationError(
                service="image_host",
                message="Image upload is not available right now.",
                context={"reason": "not_configured"},
            )

        try:
            result = await asyncio.to_thread(self._upload_blocking, content)
        except cloudinary.exceptions.AuthorizationRequired as e:
            logger.error("Cloudinary rejected credentials: %s", str(e))
            raise IntegrationError(
                service="image_host",
                message="Image host authentication failed.",
                auth_failure=True,
                context={"error": str(e)},
            ) from e
        except (cloudinary.exceptions.Error, OSError) as e:
            logger.error("Cloudinary upload failed: %s", str(e), exc_info=True)
            raise IntegrationError(
                service="image_host",
                message="Failed to upload image. Please try again later.",
                context={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        error = result.get("error") if isinstance(result, dict) else None
        if error:
            # return_error=True: failures come back in the body with the HTTP code
            auth_failure = error.get("http_code") == 401
            logger.error(
                "Cloudinary upload rejected (http_code=%s): %s",
                error.get("http_code"),
                error.get("message"),
            )
            raise IntegrationError(
                service="image_host",
                message=(
                    "Image host authentication failed."
                    if auth_failure
                    else "Failed to upload image. Please try again later."
                ),
                auth_failure=auth_failure,
                context={"http_code": error.get("http_code"), "error": error.get("message")},
            )

        url = result.get("secure_url") if isinstance(result, dict) else None
        if not url:
            logger.error("Cloudinary upload returned no secure_url: %r", result)
            raise IntegrationError(
                service="image_host",
                message="Failed to upload image. Please try again later.",
                context={"reason": "missing_secure_url"},
            )

        logger.info("Image uploaded to Cloudinary: %s (%d bytes)", url, len(content))
        return url

    def _upload_blocking(self, content: bytes) -> Dict[str, Any]:
        return cloudinary.uploader.upload(
            io.BytesIO(content),
            resource_type="image",
            folder=self.folder,
            return_error=True,
            **self._credentials,
        )
