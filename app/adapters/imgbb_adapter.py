"""
ImgBB Image Host Adapter

Uploads vehicle photos to ImgBB (https://api.imgbb.com/).
One multipart request per file; the API answers with a success flag and,
on success, the hosted URL under `data.url`.
"""
import logging
import httpx
from typing import Optional

from app.adapters.image_host_adapter_interface import (
    ImageHostAdapterInterface,
    ImageHostError,
    ImageUploadResult,
)

logger = logging.getLogger(__name__)


class ImgbbAdapter(ImageHostAdapterInterface):
    """Image host adapter for ImgBB"""

    def __init__(
        self,
        api_key: str,
        upload_url: str = "https://api.imgbb.com/1/upload",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.upload_url = upload_url
        self.timeout = timeout
        self.transport = transport

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream"
    ) -> ImageUploadResult:
        logger.info(f"IMGBB: uploading {filename} ({len(content)} bytes)")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.upload_url,
                    params={"key": self.api_key},
                    files={"image": (filename, content, content_type)}
                )
            data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"IMGBB: upload of {filename} failed: {e}")
            raise ImageHostError(f"Image host not available: {e}")
        except ValueError:
            logger.error(f"IMGBB: non-JSON response for {filename} ({response.status_code})")
            return ImageUploadResult(
                filename=filename,
                success=False,
                error=f"HTTP {response.status_code}"
            )

        if not isinstance(data, dict):
            logger.error(f"IMGBB: unexpected response for {filename} ({response.status_code})")
            return ImageUploadResult(filename=filename, success=False, error=f"HTTP {response.status_code}")

        hosted = data.get("data")
        url = hosted.get("url") if isinstance(hosted, dict) else None
        if data.get("success") and url:
            return ImageUploadResult(
                filename=filename,
                success=True,
                url=url
            )

        error = data.get("error") or {}
        message = error.get("message") if isinstance(error, dict) else str(error)
        logger.warning(f"IMGBB: {filename} rejected: {message}")
        return ImageUploadResult(filename=filename, success=False, error=message or "Upload failed")
