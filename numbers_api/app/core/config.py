"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration.  In a production deployment
you should at least override ``SECRET_KEY``, which signs the session
cookie.
"""

import os
from dataclasses import dataclass
from typing import List, Tuple


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Numbers API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Key used to sign the session cookie.  Changing it invalidates all
    # existing sessions.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "numbers_session")
    # Sessions expire after this many minutes without a request.
    session_idle_timeout_minutes: int = int(os.getenv("SESSION_IDLE_TIMEOUT_MINUTES", "30"))
    session_https_only: bool = _env_bool("SESSION_HTTPS_ONLY")

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Inclusive bounds for randomly appended values.
    random_min: int = int(os.getenv("RANDOM_MIN", "1"))
    random_max: int = int(os.getenv("RANDOM_MAX", "100"))

    @property
    def value_range(self) -> Tuple[int, int]:
        return self.random_min, self.random_max

    @property
    def session_max_age(self) -> int:
        """Idle expiry of the session in seconds."""
        return self.session_idle_timeout_minutes * 60

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
