from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from filmbase.infrastructure.config.settings import Settings
from filmbase.infrastructure.persistence.models import table_registry


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


def get_engine() -> AsyncEngine:
    """Return the process-wide engine, building it from Settings on first use."""
    if _EngineStore.engine is None:
        _EngineStore.engine = build_engine(Settings())
    return _EngineStore.engine


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with AsyncSession(get_engine(), expire_on_commit=False) as session:
        yield session


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
