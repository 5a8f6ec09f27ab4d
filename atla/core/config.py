
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "ATLA API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (PostgreSQL via asyncpg or SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./atla_dev.db",
        alias="DATABASE_URL",
    )
    create_schema_on_startup: bool = Field(
        default=False, alias="CREATE_SCHEMA_ON_STARTUP",
    )  # Dev convenience; use Alembic everywhere else

    # Wall-clock budget for point and list lookups
    query_timeout_seconds: float = Field(default=3.0, alias="QUERY_TIMEOUT_SECONDS")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
