"""
Record stores for freights and their price tables.
"""

from typing import Optional

from freight_board.core.config import ConfigManager, get_config

from .base import FreightStore, generate_freight_code
from .memory import InMemoryFreightStore
from .rest import PostgrestFreightStore


def build_store(config_manager: Optional[ConfigManager] = None) -> FreightStore:
    """
    Build the configured record store.

    Args:
        config_manager: Optional config manager (defaults to global instance)

    Returns:
        InMemoryFreightStore or PostgrestFreightStore

    Raises:
        ValueError: If the backend is unknown or PostgREST credentials are missing
    """
    config_manager = config_manager or get_config()
    store_config = config_manager.get_store_config()

    if store_config.backend == "memory":
        return InMemoryFreightStore(code_prefix=store_config.code_prefix)
    if store_config.backend == "postgrest":
        url, key = config_manager.get_store_credentials()
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set for the postgrest backend")
        return PostgrestFreightStore(url, key, store_config=store_config)
    raise ValueError(f"Unsupported store backend: {store_config.backend}")


__all__ = [
    "FreightStore",
    "InMemoryFreightStore",
    "PostgrestFreightStore",
    "build_store",
    "generate_freight_code",
]
