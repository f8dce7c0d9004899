from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seating Checkout'
    VERSION: str = '0.1.0'
    DEBUG: bool = False
    SERVICE_NAME: str = 'seating-checkout'

    # Remote ticketing API
    SEATING_API_BASE_URL: str = 'https://nfctron-frontend-seating-case-study-2024.vercel.app'
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Shown until the event (and its currency) has loaded
    DEFAULT_CURRENCY: str = 'CZK'

    # Terminal texts: 'cs' or 'en'
    LANGUAGE: str = 'en'

    # Production uses stderr only
    LOG_TO_FILE: bool = False

    @field_validator('SEATING_API_BASE_URL', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip('/')
        return v

    @field_validator('DEFAULT_CURRENCY', mode='before')
    @classmethod
    def upper_currency(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('LANGUAGE', mode='before')
    @classmethod
    def lower_language(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v


settings = Settings()  # type: ignore
