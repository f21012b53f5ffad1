from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here. Missing API keys are
    not validated; they surface as failed upstream calls.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.3"))
    top_p: float = float(os.getenv("MODEL_TOP_P", "0.9"))
    youtube_api_key: Optional[str] = os.getenv("YOUTUBE_API_KEY")
    youtube_api_url: str = os.getenv(
        "YOUTUBE_API_URL", "https://www.googleapis.com/youtube/v3"
    )
    github_api_key: Optional[str] = os.getenv("GITHUB_API_KEY")
    github_api_url: str = os.getenv("GITHUB_API_URL", "https://api.github.com")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def allowed_origins(self) -> List[str]:
        origins = [item.strip() for item in self.cors_origins.split(",")]
        return [item for item in origins if item] or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
