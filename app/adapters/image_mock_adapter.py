"""
Mock Image Host Adapter

Pretends to host images and returns deterministic URLs.
Empty files are refused, the way the real host refuses invalid images.
"""
import hashlib

from app.adapters.image_host_adapter_interface import (
    ImageHostAdapterInterface,
    ImageUploadResult,
)


class ImageMockAdapter(ImageHostAdapterInterface):
    """Mock adapter for the image host"""

    BASE_URL = "https://i.ibb.co/mock"

    def __init__(self):
        self.uploaded = []

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream"
    ) -> ImageUploadResult:
        if not content:
            return ImageUploadResult(
                filename=filename,
                success=False,
                error="Empty upload source"
            )

        digest = hashlib.sha1(content).hexdigest()[:12]
        url = f"{self.BASE_URL}/{digest}/{filename}"
        self.uploaded.append(url)
        return ImageUploadResult(filename=filename, success=True, url=url)
