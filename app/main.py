from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.climate import build_default_service


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    service = build_default_service()
    service.ensure_seeded()
    try:
        yield
    finally:
        build_default_service.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Indoor/Outdoor Climate Analytics",
        description="Daily temperature, humidity, mold-risk, season and balcony door analyses.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
