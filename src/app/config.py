"""Application configuration and settings management."""

from typing import Annotated, Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRIPQUOTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Trip Quote API"
    api_prefix: str = "/api"
    osrm_base_url: Optional[str] = Field(
        default="https://router.project-osrm.org",
        description="Base URL for the OSRM routing service (e.g., http://localhost:5000).",
    )
    osrm_profile: Literal["driving", "driving-hgv"] = Field(
        default="driving",
        description="OSRM profile to use when computing road distances.",
    )
    osrm_timeout_seconds: float = Field(
        default=5.0,
        gt=0.0,
        description="Seconds to wait for OSRM before falling back to straight-line distance.",
    )
    hub_latitude: float = Field(default=9.1714, ge=-90.0, le=90.0)
    hub_longitude: float = Field(default=77.8614, ge=-180.0, le=180.0)
    default_route_distance_km: int = Field(
        default=15,
        ge=1,
        description="Route distance used when fewer than two waypoints are known.",
    )
    booking_phone_number: str = Field(
        default="916381065877",
        description="Chat number that booking links are addressed to.",
    )
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> tuple[str, ...]:
        """Accept a JSON array or a comma-separated string from the environment."""
        if value is None:
            return tuple()
        if isinstance(value, str):
            text = value.strip()
            value = json.loads(text) if text.startswith("[") else text.split(",")
        return tuple(str(item).strip() for item in value if str(item).strip())


settings = Settings()
