# config.py
import os
from dataclasses import dataclass

@dataclass
class Config:
    """Holds all application configuration."""
    OMDB_API_KEY: str = "507fedbe"
    OMDB_BASE_URL: str = "http://www.omdbapi.com/"
    PAGE_SIZE: int = 10  # fixed by OMDb
    REQUEST_TIMEOUT: float = 10.0
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Builds a Config, letting CINELIGHT_* environment variables override the defaults."""
        config = cls()
        config.OMDB_API_KEY = os.getenv("CINELIGHT_OMDB_API_KEY", config.OMDB_API_KEY)
        config.OMDB_BASE_URL = os.getenv("CINELIGHT_OMDB_BASE_URL", config.OMDB_BASE_URL)
        config.LOG_LEVEL = os.getenv("CINELIGHT_LOG_LEVEL", config.LOG_LEVEL).upper()
        timeout = os.getenv("CINELIGHT_REQUEST_TIMEOUT")
        if timeout:
            config.REQUEST_TIMEOUT = float(timeout)
        return config
