"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONTACT_MESSAGE = (
    "We don’t currently deliver to this ZIP. Please reach out at "
    "shipping@fdlwarehouse.com or (732) 650-9200 ext.126"
)


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FDL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "FDL Cold Storage Site API"
    api_prefix: str = "/api"
    coverage_file: Path = Field(
        default=Path("data/Zones.csv"),
        description="ZIP coverage table (CSV or XLSX) with Zone, Zip, City, DeliveryDays columns.",
    )
    coverage_url: Optional[str] = Field(
        default=None,
        description="Remote coverage table URL. Takes precedence over coverage_file when set.",
    )
    coverage_timeout_seconds: float = Field(default=10.0, gt=0.0)
    coverage_max_retries: int = Field(default=1, ge=0)
    coverage_backoff_seconds: float = Field(default=0.5, ge=0.0)
    contact_message: str = Field(
        default=DEFAULT_CONTACT_MESSAGE,
        description="Body shown when a ZIP is not in the coverage table.",
    )
    contact_endpoint_url: Optional[str] = Field(
        default=None,
        description="Third-party endpoint (e.g. an Apps Script web app) that emails quote requests.",
    )
    contact_subject: str = "New Quote Request — FDL Website"
    contact_timeout_seconds: float = Field(default=15.0, gt=0.0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "https://www.fdlwarehouse.com",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("coverage_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("coverage_url", "contact_endpoint_url", mode="before")
    @classmethod
    def _blank_url_to_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            # Try comma-separated
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
