import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:5000"


class Settings(BaseSettings):
    BACKEND_URL: str = DEFAULT_BACKEND_URL
    PRONUNCIATION_API_URL: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    REQUEST_TIMEOUT: float = 10.0
    AUTOCOMPLETE_LIMIT: int = 10
    PAGE_SIZE: int = 12
    AUTOCOMPLETE_DEBOUNCE_MS: int = 300
    THEME_COOKIE: str = "darkMode"
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

if settings.BACKEND_URL == DEFAULT_BACKEND_URL and settings.ENVIRONMENT != "development":
    logger.warning(
        "BACKEND_URL is not set. Dictionary requests will go to %s.", DEFAULT_BACKEND_URL
    )
