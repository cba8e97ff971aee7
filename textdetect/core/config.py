from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080

    # 0 disables the cap
    max_body_bytes: int = 20 * 1024 * 1024

    # OCR provider: vision | mock
    ocr_provider: str = "vision"

    # Google Cloud Vision (only needed when ocr_provider=vision)
    vision_endpoint: str = "https://vision.googleapis.com"
    vision_api_key: str | None = None
    vision_access_token: str | None = None
    vision_insecure_skip_verify: bool = False
    vision_timeout_seconds: float = 30.0


settings = Settings()
