"""FastAPI server for AI review of NGO progress reports.

This module provides the REST API the report submission flow calls to get
an advisory quality review of a report before it is submitted.

Created: 2026-10-12
Version: 1.0.0
License: MIT

Example:
    Run the server::

        python -m report_api.run_api --port 8200

    Or use uvicorn directly::

        uvicorn report_api.api:app --reload --port 8200
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from utils.logging_config import get_logger, setup_logging
from .api_routers import health_router, reports_router
from .api_utils import initialize_reviewer, is_initialized

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup: a missing credential aborts here rather than on first request
    setup_logging()
    if not is_initialized():
        initialize_reviewer()
    yield


app = FastAPI(
    title="NGO Report Review API",
    description="AI-assisted quality review of NGO progress reports",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests with timing information."""
    start_time = time.time()

    logger.info(
        f"Incoming request: {request.method} {request.url.path}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "client_host": request.client.host if request.client else None
        }
    )

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2)
        }
    )

    return response


app.include_router(health_router)
app.include_router(reports_router)
