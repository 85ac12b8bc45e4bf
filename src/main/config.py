"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

import pandas as pd
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class ServiceSettings(BaseSettings):
    """HTTP service metadata and server options."""

    title: str = Field(default="ERP Insights", description="Service title")
    description: str = Field(
        default="Sales forecasting, business insights and reports "
        "for small-business ERP dashboards",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("APP_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("APP_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class SupabaseSettings(BaseSettings):
    """Data backend (Supabase PostgREST) settings."""

    url: str = Field(default="", description="Supabase project URL")
    api_key: str = Field(default="", description="Supabase anon/service API key")
    timeout: float = Field(
        default=30.0, gt=0, description="Request timeout in seconds"
    )
    page_size: int = Field(
        default=1000, ge=1, description="Rows fetched per paginated request"
    )

    model_config = SettingsConfigDict(
        env_prefix="SUPABASE_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Revenue forecast settings."""

    min_days: int = Field(
        default=7, ge=2, description="Minimum distinct days with sales"
    )
    horizon_days: int = Field(default=7, ge=1, description="Days to project ahead")
    timezone: str = Field(
        default="UTC", description="Timezone used to bucket sales into days"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject names the day bucketing cannot convert to."""
        try:
            pd.Timestamp(0, tz="UTC").tz_convert(value)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class InsightSettings(BaseSettings):
    """Insight card and dashboard settings."""

    currency_symbol: str = Field(default="R$", description="Currency prefix")
    forecast_window_days: int = Field(
        default=7,
        ge=1,
        description="Predictions summed by the revenue projection insight",
    )
    top_products_limit: int = Field(
        default=5, ge=1, description="Products listed in the dashboard ranking"
    )

    model_config = SettingsConfigDict(
        env_prefix="INSIGHTS_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    insights: InsightSettings = Field(default_factory=InsightSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Mocked in tests to provide settings for a specific environment.
    """
    return AppSettings()


settings = get_settings()
