from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from recipe_bank.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    url = settings.ASYNC_DATABASE_URL
    if url.startswith("sqlite"):
        # in-memory SQLite only lives as long as its single connection
        return create_async_engine(
            url,
            echo=settings.DB_ECHO,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=settings.DB_ECHO, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
