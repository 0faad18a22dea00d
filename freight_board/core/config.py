"""
Configuration management for the freight board core.

Handles loading and accessing:
- Business configuration (config.yaml)
- Environment variables (.env)
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class StoreConfig(BaseModel):
    """Record store settings."""

    backend: str = "memory"
    freights_table: str = "fretes"
    price_table: str = "freight_price_tables"
    price_freight_column: str = "frete_id"
    code_prefix: str = "FC"
    timeout_seconds: float = 10.0


class WriterConfig(BaseModel):
    """Fan-out writer settings."""

    compensate_on_failure: bool = False


class DisplayConfig(BaseModel):
    """Labels used by the renderers."""

    primary_destination_label: str = "Primary Destination"
    not_specified_label: str = "Not specified"


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: str = "console"


class EnvironmentSettings(BaseSettings):
    """Environment variables configuration."""

    # Supabase / PostgREST
    supabase_url: Optional[str] = Field(None, alias="SUPABASE_URL")
    supabase_key: Optional[str] = Field(None, alias="SUPABASE_KEY")

    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


class ConfigManager:
    """
    Central configuration manager for the freight board.

    Loads and provides access to:
    - Business configuration from config/config.yaml
    - Environment variables from .env
    """

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional path to config directory. Defaults to project root/config.
        """
        if config_dir is None:
            # Default to config/ directory in project root
            project_root = Path(__file__).parent.parent.parent
            config_dir = project_root / "config"

        self.config_dir = Path(config_dir)
        self._business_config: Optional[dict[str, Any]] = None
        self._env_settings: Optional[EnvironmentSettings] = None

    @property
    def business_config(self) -> dict[str, Any]:
        """Load and return business configuration from config.yaml (empty if absent)."""
        if self._business_config is None:
            config_path = self.config_dir / "config.yaml"
            if config_path.exists():
                with open(config_path, "r", encoding="utf-8") as f:
                    self._business_config = yaml.safe_load(f) or {}
            else:
                self._business_config = {}
        return self._business_config

    @property
    def env(self) -> EnvironmentSettings:
        """Load and return environment settings."""
        if self._env_settings is None:
            self._env_settings = EnvironmentSettings()
        return self._env_settings

    def get_store_config(self) -> StoreConfig:
        """Get record store settings from business config."""
        return StoreConfig(**(self.business_config.get("store") or {}))

    def get_writer_config(self) -> WriterConfig:
        """Get fan-out writer settings from business config."""
        return WriterConfig(**(self.business_config.get("writer") or {}))

    def get_display_config(self) -> DisplayConfig:
        """Get renderer labels from business config."""
        return DisplayConfig(**(self.business_config.get("display") or {}))

    def get_logging_config(self) -> LoggingConfig:
        """
        Get logging settings.

        LOG_LEVEL from the environment wins over the YAML value.
        """
        logging_config = LoggingConfig(**(self.business_config.get("logging") or {}))
        if self.env.log_level:
            logging_config.level = self.env.log_level
        return logging_config

    def get_store_credentials(self) -> tuple[Optional[str], Optional[str]]:
        """
        Get the PostgREST endpoint and API key.

        Returns:
            (url, key) tuple; either may be None when not set
        """
        return self.env.supabase_url, self.env.supabase_key


# Global config instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """
    Get the global configuration manager instance.

    Returns:
        ConfigManager singleton instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
