from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Drivers that need an event loop; the repository layer is synchronous.
ASYNC_DRIVERS = ("+asyncpg", "+aiosqlite", "+aiomysql", "+asyncmy", "+psycopg_async")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Projects"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Database
    database_url: str
    database_pooling: bool = False  # False -> one physical connection per operation
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False
    database_create_schema: bool = False  # Create missing tables on startup

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("DATABASE_URL must not be empty")
        scheme = v.split("://", 1)[0]
        if any(scheme.endswith(driver) for driver in ASYNC_DRIVERS):
            raise ValueError(
                f"DATABASE_URL uses an async driver ({scheme}). "
                "Use a synchronous driver, e.g. postgresql+psycopg2:// or sqlite://"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
