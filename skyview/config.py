"""
Runtime configuration for skyview.

Every value has a working default and can be overridden from the environment:

    SKYVIEW_API_BASE_URL     upstream base URL (current + forecast endpoints)
    SKYVIEW_API_KEY          static credential sent as ``appid``
    SKYVIEW_TIMEOUT          transport timeout in seconds
    SKYVIEW_GEOLOCATION_URL  IP geolocation endpoint used by IPGeolocation
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

# ---------------------------- Defaults --------------------------------

DEFAULT_API_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 10.0
DEFAULT_GEOLOCATION_URL = "https://ipapi.co/json/"
UNITS = "metric"  # all internal math stays in Celsius


class Settings(BaseModel):
    api_base_url: str = DEFAULT_API_BASE_URL
    api_key: str = ""
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    geolocation_url: str = DEFAULT_GEOLOCATION_URL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_base_url=os.environ.get("SKYVIEW_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            api_key=os.environ.get("SKYVIEW_API_KEY", ""),
            timeout=float(os.environ.get("SKYVIEW_TIMEOUT", DEFAULT_TIMEOUT)),
            geolocation_url=os.environ.get("SKYVIEW_GEOLOCATION_URL", DEFAULT_GEOLOCATION_URL),
        )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
