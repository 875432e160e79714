from __future__ import annotations

from typing import Optional

# `FastAPI` exposes the in-memory model as HTTP endpoints.
from fastapi import FastAPI

from transithub.api.routes import router
from transithub.api.service import TransitService
from transithub.config.models import AppConfig
from transithub.model.registry import TransitRegistry
from transithub.utils.logging import configure_logging


# App factory: build the application from a typed config instead of module-level globals,
# so tests can create isolated apps with their own registry.
def create_app(config: AppConfig, registry: Optional[TransitRegistry] = None) -> FastAPI:
    # `logging.basicConfig(...)` is a no-op if handlers already exist (common under pytest),
    # so treat this as best-effort.
    configure_logging(config.logging)

    app = FastAPI(title=config.app.name)

    # Sync handlers run in a worker thread pool; vehicles and stations lock their own state.
    app.state.transit_service = TransitService(config, registry)

    app.include_router(router)
    return app
