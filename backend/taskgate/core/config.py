"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "taskgate_user"
    POSTGRES_PASSWORD: str = "taskgate_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "taskgate_db"

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Sync URL for Alembic migrations (psycopg2)."""
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Task type registry cache ──────────────
    TASK_TYPE_CACHE_TTL_SECONDS: float = 10.0
    TASK_TYPE_NEGATIVE_CACHE_TTL_SECONDS: float = 5.0

    # ── Consecutive failure lockout ───────────
    MAX_CONSECUTIVE_FAILURES: int = 5

    # ── Budget sanity ─────────────────────────
    MIN_HOURLY_RATE_USD: float = 5.0
    HIGH_HOURLY_RATE_USD: float = 500.0

    # ── Scheduling ────────────────────────────
    MIN_START_LEAD_MINUTES: int = 60

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    SCHEMA_URL_PREFIX: str = "/api/schemas"

    # ── Admin ─────────────────────────────────
    # Comma-separated agent ids allowed to call /api/admin/*
    ADMIN_AGENT_IDS: str = ""

    @property
    def admin_agent_ids(self) -> frozenset[str]:
        return frozenset(i.strip() for i in self.ADMIN_AGENT_IDS.split(",") if i.strip())

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
