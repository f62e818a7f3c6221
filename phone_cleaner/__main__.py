"""Entry point: python -m phone_cleaner, or the phone-cleaner script."""

import uvicorn
from .config import settings

APP_FACTORY = "phone_cleaner.app:create_app"


def main():
    log_level = "debug" if settings.debug else "info"
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=log_level,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
