from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    """
    Application configuration settings.
    Loads from environment variables or .env file.
    """

    # Application
    APP_NAME: str = "Optimrental API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True

    # External Platform Adapters
    # Options:
    # - mock: In-memory implementations (development, tests)
    # - supabase / imgbb: Hosted platforms reached over HTTP
    STORE_ADAPTER_TYPE: Literal["mock", "supabase"] = "mock"
    AUTH_ADAPTER_TYPE: Literal["mock", "supabase"] = "mock"
    IMAGE_HOST_ADAPTER_TYPE: Literal["mock", "imgbb"] = "mock"

    # Supabase (database + auth)
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""

    # ImgBB (vehicle images)
    IMGBB_API_KEY: str = ""
    IMGBB_UPLOAD_URL: str = "https://api.imgbb.com/1/upload"

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 15.0

    # Administrator provisioned by seed_admin.py
    ADMIN_EMAIL: str = "admin@optimrental.ch"
    ADMIN_PASSWORD: str = ""

    # Public website
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Booking
    CURRENCY: str = "CHF"
    BOOKING_REDIRECT_SECONDS: float = 5.0
    MAX_BOOKING_HOURS: int = 24

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
