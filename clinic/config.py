#config.py
import os
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
    # Application Settings
    APP_NAME: str = "Clinic Management API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "127.0.0.1"
    PORT: int = int(os.environ.get("PORT", 8000))

    # Database Settings
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///./clinic.db")
    SQL_ECHO: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings: Settings = get_settings()
