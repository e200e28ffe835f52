"""Engine configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Food Icon Engine"
    debug: bool = False
    log_level: str = "INFO"

    # In-process resolution cache
    icon_cache_capacity: int = 200

    # Durable cache tier (MongoDB)
    durable_cache_enabled: bool = False
    icon_cache_namespace: str = "food_icon"
    icon_cache_version: str = "v1"  # Bump when the catalog changes between releases
    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = "food_icons"
    icon_cache_collection: str = "icon_cache"
    mongo_timeout_ms: int = 2000

    # Catalog resources (bundled package data when unset)
    icon_definitions_path: str | None = None
    tag_catalog_dir: str | None = None

    # Reverse tag search
    min_search_phrase_length: int = 2

    @property
    def is_durable_cache_configured(self) -> bool:
        """Check if the durable cache tier is enabled and has a Mongo URI."""
        return self.durable_cache_enabled and bool(self.mongo_uri)

    @property
    def durable_key_prefix(self) -> str:
        """Key prefix shared by every durable entry of this catalog version."""
        return f"{self.icon_cache_namespace}:{self.icon_cache_version}:"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
