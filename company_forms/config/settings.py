"""
Settings module for Company Forms.

Environment-based configuration with sensible defaults.
All settings can be overridden via environment variables prefixed with
``COMPANY_FORMS_`` (e.g. ``COMPANY_FORMS_SHOW_COMPANY_VARIANTS=true``).
"""

import os
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    The browse and mixed-form defaults mirror the preferences a presentation
    layer would otherwise persist for the user.
    """

    # Environment
    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Browsing
    show_company_variants: bool = Field(
        default=False,
        description="Insert alternate structures next to their base company in listings"
    )
    translate_names: bool = Field(
        default=False,
        description="Show the English translation instead of the German name in listings"
    )

    # Mixed forms builder
    # GmbH & Co. KG is the most common mixed form, so it is the starting pair
    mixed_form_base: str = Field(
        default="kg",
        description="Catalog id of the default base company"
    )
    mixed_form_insertion: str = Field(
        default="gmbh",
        description="Catalog id of the default insertion company"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )

    model_config = SettingsConfigDict(
        env_prefix="COMPANY_FORMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached for performance. To reload, use:
        get_settings.cache_clear()

    Returns:
        Settings instance
    """
    return Settings()


def load_settings_from_env(env_file: str = ".env") -> Settings:
    """Load settings from a specific env file."""
    if os.path.exists(env_file):
        from dotenv import load_dotenv
        load_dotenv(env_file)
    get_settings.cache_clear()
    return get_settings()
