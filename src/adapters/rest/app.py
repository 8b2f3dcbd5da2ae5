"""
FastAPI application: REST adapter for the Meal Analyzer & Personal Coach.

Usage:
    python run_api.py

Or directly:
    uvicorn adapters.rest.app:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure src/ is on sys.path when invoked via uvicorn directly
_src_dir = Path(__file__).resolve().parent.parent.parent
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from infrastructure.config import Settings
from factory import ServiceFactory
from adapters.rest.dependencies import set_factory
from adapters.rest.routers import auth, meals, plans, history

__version__ = "0.1.0"


def create_app(factory: Optional[ServiceFactory] = None) -> FastAPI:
    """Build the API. Without a factory, one is built from the environment."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize ServiceFactory on startup."""
        active = factory
        if active is None:
            config = Settings.from_env(project_root=_src_dir.parent)
            active = ServiceFactory(config)
        active.initialize()
        set_factory(active)
        yield

    app = FastAPI(
        title="Meal Analyzer & Personal Coach",
        version=__version__,
        description="Meal photo nutrition estimates and 7-day plans powered by generative AI.",
        lifespan=lifespan,
    )

    # CORS: permissive for development; tighten allowed_origins in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(meals.router)
    app.include_router(plans.router)
    app.include_router(history.router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
