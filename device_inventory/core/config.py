# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Lisbon")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Storage Configuration
        # "mongo" for the durable store, "memory" for a process-local store
        self.store_backend: Final[str] = os.getenv("STORE_BACKEND", "mongo").strip().lower()

        # Database Configuration
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "device_inventory")
        self.devices_collection: Final[str] = os.getenv("DEVICES_COLLECTION", "devices")

        # Worker Pool Configuration
        self.worker_pool_size: Final[int] = int(os.getenv("WORKER_POOL_SIZE", "10"))

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # API Configuration
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "/api/v1/devices")
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        if self.worker_pool_size < 1:
            raise ValueError(f"WORKER_POOL_SIZE must be positive, got {self.worker_pool_size}")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
