from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from libs.common.config import get_settings
from libs.common.datetime_utils import utc_now
from libs.db.executor import QueryError, QueryExecutor
from libs.db.session import get_executor
from sqlalchemy import literal, select

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {"status": "healthy", "timestamp": utc_now().isoformat()}


@router.get("/api/dbtest")
async def database_check(executor: QueryExecutor = Depends(get_executor)):
    """Round-trip a trivial query to confirm the pool can reach the database."""
    try:
        result = await executor.scalar(select(literal(1) + literal(1)))
    except QueryError as exc:
        body = {"message": "Database connection failed"}
        if not get_settings().is_production:
            body["error"] = exc.detail
        return JSONResponse(status_code=500, content=body)
    return {"message": "Database connection successful", "result": result}
