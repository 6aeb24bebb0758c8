from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from libs.common.config import get_settings

# MySQL cuts GROUP_CONCAT results at 1024 bytes unless the session raises it
GROUP_CONCAT_MAX_LEN = 1_048_576


def engine_connect_args(database_url: str) -> dict:
    """Driver connect arguments for ``database_url``'s backend."""
    if make_url(database_url).get_backend_name() == "mysql":
        return {
            "init_command": (
                f"SET SESSION group_concat_max_len = {GROUP_CONCAT_MAX_LEN}"
            )
        }
    return {}


settings = get_settings()

# Async engine backed by a bounded connection pool. Requests beyond
# pool_size + max_overflow wait up to pool_timeout seconds for a connection.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,  # Test connections before using
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_timeout=settings.DB_POOL_TIMEOUT,
    pool_recycle=settings.DB_POOL_RECYCLE,
    connect_args=engine_connect_args(settings.DATABASE_URL),
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)
