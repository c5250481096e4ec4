"""
FastAPI application entry point.

Run:  HOSTS_FILE=./hosts python -m uvicorn app.main:app --port 8000
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from hostsedit.config import Config
from hostsedit.services.document_service import HostsService
from app.routes import router, init_service


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the application around a fresh :class:`HostsService`."""
    config = config or Config.from_env()
    config.validate()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )

    init_service(HostsService(config))

    application = FastAPI(title="Hosts File Editor")
    application.include_router(router)
    return application


app = create_app()
