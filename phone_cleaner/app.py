"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from . import __version__
from .config import settings
from .api.router import api_router
from .channels.registry import register_channel
from .channels.storage import StorageChannel
from .plugins import register_plugins

# Configure logging for our modules
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
logging.getLogger("phone_cleaner").setLevel(logging.DEBUG if settings.debug else logging.INFO)


def create_app() -> FastAPI:
    app = FastAPI(
        title="phone-cleaner",
        version=__version__,
        description="Native storage bridge for the phone-cleaner app",
    )

    # Channels must be attached before the app serves its first request
    register_channel(StorageChannel(name=settings.storage_channel, home_dir=settings.home_dir))
    register_plugins(app)

    app.include_router(api_router, prefix="/api")

    return app
