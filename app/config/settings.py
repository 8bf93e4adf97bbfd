from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database - SQLite by default; any async SQLAlchemy URL works
    database_url: str = "sqlite+aiosqlite:///./chat.db"

    # Application
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # AI inference backend
    # Provider kind selects the wire contract: huggingface | hf-space | custom
    ai_provider: Literal["huggingface", "hf-space", "custom"] = "huggingface"
    ai_base_url: str = ""
    # Empty = provider default (base URL itself, api/predict, or analyze)
    ai_analyze_path: str = ""
    # Sent as "Authorization: Bearer <token>" when set
    ai_token: str = ""
    ai_timeout_seconds: float = 30.0

    @field_validator("ai_provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: object) -> object:
        """Accept provider names case-insensitively."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def ai_token_configured(self) -> bool:
        """Check if a bearer token is configured for the AI backend."""
        return bool(self.ai_token)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
