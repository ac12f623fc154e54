from pathlib import Path
from typing import List, Optional

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

    PROJECT_NAME: str = 'Storefront'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: str = 'postgres'
    POSTGRES_DB: str = 'storefront_db'
    POSTGRES_PORT: int = 5432

    # Read replica (optional, falls back to primary)
    POSTGRES_REPLICA_SERVER: Optional[str] = None
    POSTGRES_REPLICA_PORT: Optional[int] = None

    # Full URL overrides, e.g. sqlite+aiosqlite:///./storefront.db
    DATABASE_URL: Optional[str] = None
    DATABASE_READ_URL: Optional[str] = None

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE_WRITE: int = 5
    DB_POOL_SIZE_READ: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    @property
    def DATABASE_READ_URL_ASYNC(self) -> str:
        if self.DATABASE_READ_URL:
            return self.DATABASE_READ_URL
        if self.POSTGRES_REPLICA_SERVER and not self.DATABASE_URL:
            port = self.POSTGRES_REPLICA_PORT or self.POSTGRES_PORT
            return (
                f'postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}'
                f'@{self.POSTGRES_REPLICA_SERVER}:{port}/{self.POSTGRES_DB}'
            )
        return self.DATABASE_URL_ASYNC

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
