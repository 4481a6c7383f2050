from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_PROJECT_NAME = "SkillSwap API"
DEFAULT_API_V1_PREFIX = "/api/v1"
DEFAULT_DATABASE_URL = 'sqlite:///./skillswap.db'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    API_V1_PREFIX: str = DEFAULT_API_V1_PREFIX
    ENV: str = 'development'
    DEBUG: bool = False

    DATABASE_URL: str = DEFAULT_DATABASE_URL
    LOG_LEVEL: str = 'INFO'
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ['*']

    SECRET_KEY: str = 'change-me'
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    AUTO_CREATE_TABLES: bool = False

    PASSWORD_MIN_LENGTH: int = 6
    DEFAULT_PAGE_SIZE: int = 50

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, value):  # type: ignore[override]
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return []
            if value == '*':
                return ['*']
            return [item.strip() for item in value.split(',') if item.strip()]
        return value


settings = Settings()
