"""
Store Service - Factory Pattern

Service that selects the appropriate data store adapter based on configuration.
Allows easy switching between the in-memory mock and Supabase.
"""
from app.adapters.store_adapter_interface import DataStoreInterface
from app.adapters.store_mock_adapter import StoreMockAdapter
from app.core.config import settings


def get_store_adapter() -> DataStoreInterface:
    """
    Factory function to get the appropriate data store adapter.

    Returns:
        Store adapter instance based on configuration
    """
    adapter_type = settings.STORE_ADAPTER_TYPE

    if adapter_type == "mock":
        return StoreMockAdapter()
    elif adapter_type == "supabase":
        from app.adapters.supabase_adapters import SupabaseStoreAdapter
        from app.utils.supabase_client import SupabaseClient
        # Server-side access uses the service role so admin writes pass RLS
        key = settings.SUPABASE_SERVICE_ROLE_KEY or settings.SUPABASE_ANON_KEY
        return SupabaseStoreAdapter(
            SupabaseClient(settings.SUPABASE_URL, key, timeout=settings.HTTP_TIMEOUT_SECONDS)
        )
    else:
        raise ValueError(f"Unknown store adapter type: {adapter_type}")


# Singleton instance
store_service = get_store_adapter()


def get_store() -> DataStoreInterface:
    """FastAPI dependency returning the configured store."""
    return store_service
