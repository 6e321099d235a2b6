"""Application configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "aptskola-mailer"
    app_version: str = "0.1.0"
    debug: bool = False

    # Brevo transactional email API
    brevo_api_key: str = ""
    brevo_api_url: str = "https://api.brevo.com/v3/smtp/email"
    brevo_timeout_seconds: float = 30.0

    # Sender identities
    receipt_sender_email: str = "connect@aptskola.com"
    receipt_sender_name: str = "Apt Skola Support"
    followup_sender_email: str = "Harish@aptskola.com"
    followup_sender_name: str = "Harish from AptSkola"

    # Message content
    followup_delay_hours: int = 72
    default_recipient_name: str = "Parent"
    attachment_filename: str = "AptSkola-Admissions-Toolkit.pdf"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
