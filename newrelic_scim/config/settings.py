from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from ..constants import BASE_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    scim_api_token: str = Field(default="", description="New Relic SCIM API bearer token")
    scim_base_url: str = Field(default=BASE_URL, description="Base URL of the SCIM v2 API")
    scim_timeout: float = Field(default=DEFAULT_TIMEOUT, description="HTTP timeout in seconds")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    scim_trace_console: bool = Field(default=False, description="Print operation spans to the console")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


_settings_instance = None


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
