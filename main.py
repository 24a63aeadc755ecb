"""
Entry point for the Forecast Engine API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


app = FastAPI(
    title="Forecast Engine",
    description="Twelve-month projections of users, businesses, revenue and orders per country and metric.",
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    log.info("starting forecast engine on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=True,
    )
