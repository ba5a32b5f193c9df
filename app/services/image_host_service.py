"""
Image Host Service - Factory Pattern

Service that selects the appropriate image host adapter based on configuration.
"""
from app.adapters.image_host_adapter_interface import ImageHostAdapterInterface
from app.adapters.image_mock_adapter import ImageMockAdapter
from app.core.config import settings


def get_image_host_adapter() -> ImageHostAdapterInterface:
    """
    Factory function to get the appropriate image host adapter.

    Returns:
        Image host adapter instance based on configuration
    """
    adapter_type = settings.IMAGE_HOST_ADAPTER_TYPE

    if adapter_type == "mock":
        return ImageMockAdapter()
    elif adapter_type == "imgbb":
        from app.adapters.imgbb_adapter import ImgbbAdapter
        return ImgbbAdapter(
            api_key=settings.IMGBB_API_KEY,
            upload_url=settings.IMGBB_UPLOAD_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS
        )
    else:
        raise ValueError(f"Unknown image host adapter type: {adapter_type}")


# Singleton instance
image_host_service = get_image_host_adapter()


def get_image_host() -> ImageHostAdapterInterface:
    """FastAPI dependency returning the configured image host."""
    return image_host_service
