"""Service settings, read from the environment or a .env file."""
import os
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Link-link engine service settings."""

    app_name: str = "Link-Link Engine"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # Comma-separated list of allowed origins
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    shuffle_max_attempts: int = 20
    simulation_max_iterations: int = 200

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def get_cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Shared settings; rebuilt on every call while DEBUG=true."""
    global _settings
    if _settings is None or os.getenv("DEBUG", "false").lower() == "true":
        _settings = Settings()
    return _settings
