# client/app/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    API_BASE_URL: str = "http://localhost:8080/api"
    API_TIMEOUT: float = 10.0
    API_TOKEN: str | None = None
    TIMEZONE: str | None = None  # None: the machine's local zone
    HORIZON_DAYS: int = 31

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )


settings = Settings()
