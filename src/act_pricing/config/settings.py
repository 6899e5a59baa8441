from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Travel-data API consumed by the pricing engine
    travel_api_base_url: str = "http://localhost:8000"
    travel_api_timeout_seconds: float = 15.0

    # Google Distance Matrix (travel-data service)
    google_maps_api_key: str = ""
    google_distance_matrix_url: str = "https://maps.googleapis.com/maps/api/distancematrix/json"
    travel_cache_stale_minutes: int = 60 * 24 * 30  # 30 days

    # Redis (travel route cache)
    redis_url: str = "redis://localhost:6379/0"

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
