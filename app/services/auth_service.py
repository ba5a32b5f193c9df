"""
Auth Service - Factory Pattern

Service that selects the appropriate auth adapter based on configuration.
"""
import logging

from app.adapters.auth_adapter_interface import AuthAdapterInterface
from app.adapters.auth_mock_adapter import AuthMockAdapter
from app.core.config import settings
from app.models.user import UserRole

logger = logging.getLogger(__name__)


def get_auth_adapter() -> AuthAdapterInterface:
    """
    Factory function to get the appropriate auth adapter.

    Returns:
        Auth adapter instance based on configuration
    """
    adapter_type = settings.AUTH_ADAPTER_TYPE

    if adapter_type == "mock":
        return AuthMockAdapter()
    elif adapter_type == "supabase":
        from app.adapters.supabase_adapters import SupabaseAuthAdapter
        from app.utils.supabase_client import SupabaseClient
        client = SupabaseClient(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY or settings.SUPABASE_SERVICE_ROLE_KEY,
            timeout=settings.HTTP_TIMEOUT_SECONDS
        )
        admin_client = None
        if settings.SUPABASE_SERVICE_ROLE_KEY:
            admin_client = SupabaseClient(
                settings.SUPABASE_URL,
                settings.SUPABASE_SERVICE_ROLE_KEY,
                timeout=settings.HTTP_TIMEOUT_SECONDS
            )
        return SupabaseAuthAdapter(client, admin_client)
    else:
        raise ValueError(f"Unknown auth adapter type: {adapter_type}")


# Singleton instance
auth_service = get_auth_adapter()


async def seed_mock_admin() -> None:
    """
    Provision the configured admin on the in-memory auth adapter.
    The mock keeps users in process memory, so seed_admin.py cannot reach it.
    """
    if not isinstance(auth_service, AuthMockAdapter) or not settings.ADMIN_PASSWORD:
        return
    await auth_service.create_user(
        settings.ADMIN_EMAIL,
        settings.ADMIN_PASSWORD,
        email_confirm=True,
        user_metadata={"role": UserRole.ADMIN.value}
    )
    logger.info(f"Mock admin provisioned: {settings.ADMIN_EMAIL}")


def get_auth() -> AuthAdapterInterface:
    """FastAPI dependency returning the configured auth adapter."""
    return auth_service
