"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./expensify.db"

    # Service
    service_name: str = "expensify-gateway"
    log_level: str = "INFO"

    # Calendar day boundaries for "today" and "current month"
    reporting_timezone: str = "Asia/Kolkata"

    # Max ledger rows returned by list endpoints
    history_limit: int = 500


settings = Settings()
