"""Client settings loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_ACCOUNT_PATH_DEFAULT = "service_account.json"
LOG_LEVEL_DEFAULT = "INFO"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GmailSettings(BaseSettings):
    """Service account and sender settings for the Gmail client."""

    model_config = SettingsConfigDict(env_prefix="GMAIL_")

    service_account_path: str = SERVICE_ACCOUNT_PATH_DEFAULT
    send_from_email: str = ""
    mock_mode: bool = False
    log_level: LogLevel = LOG_LEVEL_DEFAULT
