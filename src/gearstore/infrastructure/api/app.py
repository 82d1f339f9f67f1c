"""FastAPI application.

Run with ``uvicorn gearstore.infrastructure.api.app:app`` or
``gearstore serve``.
"""

from __future__ import annotations

from fastapi import FastAPI

from gearstore.infrastructure.api.errors import register_exception_handlers
from gearstore.infrastructure.api.routes.admin import router as admin_router
from gearstore.infrastructure.api.routes.session import router as session_router
from gearstore.infrastructure.api.routes.store import router as store_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="MMA Gear Store",
        description="Storefront, hold management and admin API",
    )
    register_exception_handlers(app)
    app.include_router(store_router)
    app.include_router(admin_router)
    app.include_router(session_router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
