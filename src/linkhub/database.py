# Database connection setup
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings, get_settings
from .core.models.base import BaseModel

# Get settings
settings = get_settings()


def build_engine_kwargs(config: Settings) -> dict:
    """Pool bounds and timeouts for the configured backend."""
    kwargs = {"echo": config.database_echo}
    if config.database_url.startswith("sqlite"):
        # SQLite drivers don't take pool sizing arguments
        return kwargs

    kwargs.update(
        pool_size=config.database_pool_size,
        max_overflow=config.database_max_overflow,
        pool_timeout=config.database_pool_timeout,
        pool_pre_ping=True,
    )
    if "+asyncpg" in config.database_url:
        kwargs["connect_args"] = {"command_timeout": config.database_command_timeout}
    return kwargs


# Create async engine using settings
engine = create_async_engine(settings.database_url, **build_engine_kwargs(settings))

# Session factory
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db_session():
    """Get database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables():
    """Create all tables."""
    # Make sure every model is registered on the metadata
    from .core import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
