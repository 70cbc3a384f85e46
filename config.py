from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def _ConfigDict(env_prefix: str) -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix=env_prefix,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Centralised runtime configuration."""

    model_config = _ConfigDict("weather_")

    app_title: str = "Weather Forecast API"
    app_version: str = "1.0.0"

    # Binding used when started via `python main.py`
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Seed for the shared random source; unseeded when unset
    random_seed: Optional[int] = None


settings = Settings()
