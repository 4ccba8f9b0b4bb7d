# plot_device/main.py
import logging
import random
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from plot_device import __version__
from plot_device.config import Settings, load_settings
from plot_device.data_store import Collections, load_collections
from plot_device.gateway import build_backend
from plot_device.routers.backend import router as backend_router
from plot_device.routers.public import router as public_router

logger = logging.getLogger(__name__)

CLIENT_DIR = Path(__file__).parent / "client"


@asynccontextmanager
async def lifespan(app: FastAPI):
    names = ", ".join(f"{c.name.value}={len(c.items)}" for c in app.state.collections.values())
    logger.info("plot device ready (%s)", names)
    yield
    await app.state.backend.aclose()
    logger.info("plot device stopped")


def create_app(settings: Optional[Settings] = None, collections: Optional[Collections] = None) -> FastAPI:
    settings = settings or load_settings()
    collections = collections if collections is not None else load_collections()
    rng = random.Random(settings.shuffle_seed) if settings.shuffle_seed is not None else None

    app = FastAPI(title="Plot Device API", version=__version__, lifespan=lifespan)

    # built once, shared by reference with every request
    app.state.settings = settings
    app.state.collections = collections
    app.state.rng = rng
    app.state.backend = build_backend(settings, collections, rng)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(public_router)
    app.include_router(backend_router)
    app.mount("/client", StaticFiles(directory=CLIENT_DIR, html=True), name="client")

    return app


app = create_app()
