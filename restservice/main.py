# restservice/main.py

import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restservice.common.counter import AtomicCounter
from restservice.core.config import Settings, settings as default_settings
from restservice.core.logging import setup_logging
from restservice.routers import greeting
from restservice.services.greeting_service import GreetingService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a new application. Each app owns its own counter, so ids restart
    at 1 for every instance.
    """
    settings = settings or default_settings

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.settings = settings
    app.state.greeting_service = GreetingService(counter=AtomicCounter())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # routes
    app.include_router(greeting.router)

    return app


app = create_app()


def run():
    setup_logging(default_settings.LOG_LEVEL)
    logger.info(
        "Starting %s on %s:%d (pid %d)",
        default_settings.PROJECT_NAME,
        default_settings.HOST,
        default_settings.PORT,
        os.getpid(),
    )
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
