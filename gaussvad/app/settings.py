"""API settings configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """Settings for the GaussVAD API server."""

    model_config = SettingsConfigDict(
        env_prefix="GAUSSVAD_API_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8000, validation_alias="PORT")
    log_level: str = "info"
    debug: bool = False
    max_upload_bytes: int = 50 * 1024 * 1024
    preload_detectors: bool = True


settings = APISettings()
