
from pydantic import Field
from pydantic_settings import BaseSettings

_DEFAULT_JWT_SECRET = "change-me-in-production-32-bytes-min"

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Courier Portal API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Database (Postgres via asyncpg in production, SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./courier_dev.db",
        alias="DATABASE_URL",
    )

    # Sessions / user activity
    jwt_secret: str = Field(
        default=_DEFAULT_JWT_SECRET,
        alias="JWT_SECRET",
    )
    activity_window_minutes: int = Field(
        default=30, alias="ACTIVITY_WINDOW_MINUTES",
    )  # Sessions idle longer than this are no longer "active"

    # Where the front-end renders invoice receipts
    receipt_page_path: str = Field(
        default="/dashboard/receipt", alias="RECEIPT_PAGE_PATH",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def jwt_secret_is_default(self) -> bool:
        return self.jwt_secret == _DEFAULT_JWT_SECRET

settings = Settings()
