"""
Configuration settings for the API.
Loads environment variables and provides application settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    # Database
    DATABASE_URL: str = "sqlite:///./cash_deposit.db"
    SQL_ECHO: bool = False

    # API
    PROJECT_NAME: str = "Cash Deposit API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Account registration and cash deposit tracking backed by a relational store"

    # Notification relay
    SMTP_SERVER: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASS: str = ""
    SMTP_TIMEOUT: float = 10.0

    # When true, a failed deposit e-mail turns the request into a 500
    # even though the transaction is already stored.
    NOTIFICATION_FAILURE_IS_ERROR: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"


# Create global settings instance
settings = Settings()
