from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from libs.db.config import AsyncSessionLocal
from libs.db.executor import QueryExecutor


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields an async database session.
    The pooled connection goes back to the pool when the session closes.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_executor(
    db: AsyncSession = Depends(get_async_db),
) -> QueryExecutor:
    """FastAPI dependency wrapping the request session in a QueryExecutor."""
    return QueryExecutor(db)
