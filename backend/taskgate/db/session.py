"""
Async SQLAlchemy engine and session factory.

`engine` / `async_session` are built once from settings.DATABASE_URL.
`build_engine(url)` builds an engine for another database (tests
against SQLite).
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from taskgate.core.config import settings


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine.  Only Postgres gets a connection pool."""
    if url.startswith("postgresql"):
        return create_async_engine(
            url,
            echo=echo,
            pool_size=20,
            max_overflow=10,
            pool_pre_ping=True,
        )
    return create_async_engine(url, echo=echo, poolclass=NullPool)


engine = build_engine(settings.DATABASE_URL, echo=(settings.APP_ENV == "development"))

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """Dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
