"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./loan_desk.db"
    auto_create_tables: bool = True

    # Service
    service_name: str = "loan-desk"
    log_level: str = "INFO"

    # Review dashboard
    default_list_limit: int = 100
    trend_window_days: int = 30


settings = Settings()
