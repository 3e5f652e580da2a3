from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from app.web import router as web_router
from datastore.stores import AppStore
from logging_config import configure_logging
from settings import get_settings
from storage.mock_api import build_default_dates_api, build_default_energy_api


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app_store = AppStore(init_delay_ms=get_settings().init_delay_ms)
    app.state.app_store = app_store
    await app_store.initialize_app()
    try:
        yield
    finally:
        app_store.set_initialized(False)
        build_default_dates_api.cache_clear()
        build_default_energy_api.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Energy Level Analytics",
        description="Daily energy-level readings rendered as an animated gradient line chart.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    app.include_router(web_router)
    return app

app = create_app()
