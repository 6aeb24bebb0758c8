"""FastAPI application for the Nisapoti admin dashboard API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.common.config import get_settings
from libs.common.error_handler import add_exception_handlers
from libs.common.middleware import add_observability_middleware
from services.admin_service.routers import (
    auth_router,
    creators_router,
    dashboard_router,
    supporters_router,
    system_router,
    wishlist_router,
    withdrawals_router,
)


def create_app() -> FastAPI:
    """Create and configure the admin API app."""
    settings = get_settings()
    app = FastAPI(
        title="Nisapoti Admin API",
        version="0.1.0",
        description="Reporting and withdrawal management for the Nisapoti admin dashboard.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    # Structured logging + request tracing
    add_observability_middleware(app)

    # JSON bodies for database and unexpected errors
    add_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(auth_router)
    app.include_router(creators_router)
    app.include_router(supporters_router)
    app.include_router(withdrawals_router)
    app.include_router(wishlist_router)
    app.include_router(dashboard_router)

    return app


app = create_app()
