"""
Application configuration using Pydantic settings.
"""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosted backend (Supabase) Configuration
    supabase_url: str = Field(
        default="https://your-project.supabase.co",
        description="Base URL of the Supabase project"
    )
    supabase_anon_key: str = Field(
        default="",
        description="Anonymous API key for the Supabase project"
    )
    waitlist_table: str = Field(
        default="waitlist",
        description="Table that stores waitlist signups"
    )
    analytics_table: str = Field(
        default="analytics",
        description="Table that stores analytics events"
    )
    backend_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout in seconds for hosted backend requests"
    )

    # Impact Statistics Parameters
    avg_yard_acres: float = Field(
        default=0.2,
        description="Average pledged yard size in acres"
    )
    co2_tons_per_acre: float = Field(
        default=1.5,
        description="Net CO2 benefit per converted acre per year, including eliminated lawn emissions"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Application Settings
    app_name: str = Field(
        default="Native Yards Waitlist API",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
