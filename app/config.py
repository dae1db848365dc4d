from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from functools import lru_cache

from app.models.cla_config import Configuration, load_configuration


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "CLA Bot"
    debug: bool = False

    # GitHub
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    webhook_secret: str = ""  # Signature check is skipped when empty

    # CLA
    cla_config_path: str = "cla_config.yaml"
    signing_timeout: float = 10.0  # Seconds

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_cla_configuration() -> Configuration:
    return load_configuration(get_settings().cla_config_path)
