"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # External street routing
    ors_api_key: str = ""  # empty -> OSRM only
    ors_base_url: str = "https://api.openrouteservice.org/v2/directions"
    osrm_base_url: str = "https://router.project-osrm.org/route/v1"
    routing_timeout_seconds: float = 10.0

    # Graph search
    max_connection_distance_km: float = 0.5
    max_search_expansions: Optional[int] = None  # None -> unbounded

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
