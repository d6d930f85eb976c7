from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BOOKING_API_BASE_URL: str = "http://127.0.0.1:8000"
    BOOKING_OFFLINE: bool = False
    BOOKING_YEAR: int = 2025

    SLOTS_POLL_INTERVAL_SECONDS: float = 15.0
    HTTP_TIMEOUT_SECONDS: float = 5.0

    BUSINESS_NAME: str = "Barbería Los Gitanos"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
