"""
Talk Starters API — FastAPI app factory.

Use: uvicorn talk_api.app:app  (or: talk-starters serve)
Or:  from talk_api import app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import ServerConfig, get_config
from .routes import register_routes
from .state import get_state, init_state

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    if config is not None:
        init_state(config)
    config = config or get_config()
    logging.basicConfig(
        level=config.log_level,
        format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
    )

    app = FastAPI(
        title="Talk Starters API",
        description="Conversation starters by category, search, or random draw without repeats",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_logging():
        state = get_state()
        ok, errors = state.config.validate()
        for error in errors:
            logger.warning("[startup] %s", error)
        logger.info("[startup] Talk Starters API starting...")
        logger.info("[startup] Data: %s", state.config.data_dir)
        if ok:
            categories = state.content.list_categories()
            logger.info("[startup] %d categories available", len(categories))
        if state.config.random_seed is not None:
            logger.info("[startup] Random seed: %s", state.config.random_seed)

    return app


app = create_app()
