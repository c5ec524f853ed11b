"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./finboard.db"

    # Service
    service_name: str = "finboard"
    log_level: str = "INFO"

    # Dashboard
    trend_months: int = 6
    recent_transactions_limit: int = 10


settings = Settings()
