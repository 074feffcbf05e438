"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from mentor_payouts.domain.payouts import (
    DEFAULT_GST_PERCENTAGE,
    DEFAULT_PLATFORM_FEE_PERCENTAGE,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_token: str
    admin_email: str = "admin@edpay.com"
    sign_in_password: str = "password"
    platform_fee_percentage: float = DEFAULT_PLATFORM_FEE_PERCENTAGE
    gst_percentage: float = DEFAULT_GST_PERCENTAGE
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
