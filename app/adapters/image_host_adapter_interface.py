"""
Image Host Adapter Interface

Abstract interface for the third-party image host used for vehicle photos.
"""
from abc import ABC, abstractmethod
from typing import Optional
from pydantic import BaseModel, Field


class ImageHostError(Exception):
    """Exception raised when the image host cannot be reached"""
    pass


class ImageUploadResult(BaseModel):
    """Result of a single image upload"""
    filename: str = Field(..., description="Original file name")
    success: bool = Field(..., description="Whether the host accepted the image")
    url: Optional[str] = Field(None, description="Public URL of the hosted image")
    error: Optional[str] = Field(None, description="Host error message")


class ImageHostAdapterInterface(ABC):
    """Abstract interface for image host adapters"""

    @abstractmethod
    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream"
    ) -> ImageUploadResult:
        """
        Upload a single image.

        Returns:
            Upload result; success=False when the host refused the file

        Raises:
            ImageHostError: If the host cannot be reached
        """
        pass
