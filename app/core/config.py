# app/core/config.py

from pydantic_settings import BaseSettings
from pathlib import Path
from functools import lru_cache


class Settings(BaseSettings):
    # --- PROJECT ---
    PROJECT_NAME: str = "Teminat Mektubu Takip API"

    # --- POSTGRES ---
    POSTGRES_USER: str = "teminat"
    POSTGRES_PASS: str = "teminat"
    POSTGRES_PORT: int = 5432
    POSTGRES_NAME: str = "teminat"
    POSTGRES_HOST: str = "localhost"

    # --- DATABASE ---
    # Full URL wins over the POSTGRES_* parts (tests use sqlite://)
    DATABASE_URL: str | None = None
    SQL_ECHO: bool = False

    # --- DISPLAY ---
    DEFAULT_CURRENCY: str = "TRY"
    DISPLAY_LOCALE: str = "tr_TR"

    # --- CLIENT ---
    API_BASE_URL: str = "http://localhost:5000"
    API_TIMEOUT: float = 10.0

    # --- LOGGING ---
    LOG_LEVEL: str = "INFO"

    # --- PATHS ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    MEDIA_DIR: Path = BASE_DIR / "media"
    EXPORT_DIR: Path = MEDIA_DIR / "exports"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def model_post_init(self, __context):
        if self.DATABASE_URL:
            return
        self.DATABASE_URL = (
            f"postgresql://{self.POSTGRES_USER}:"
            f"{self.POSTGRES_PASS}@"
            f"{self.POSTGRES_HOST}:"
            f"{self.POSTGRES_PORT}/"
            f"{self.POSTGRES_NAME}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
