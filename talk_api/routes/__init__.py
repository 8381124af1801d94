"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .health import router as health_router
from .talk import router as talk_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(health_router, tags=["health"])
    app.include_router(talk_router, tags=["talk"])
