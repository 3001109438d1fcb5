#!/usr/bin/env python3

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging
import time

import uvicorn

from airport_dashboard.sync.coordinator import DashboardCoordinator
from airport_dashboard.web.config import (
    ALLOWED_ORIGINS, ALLOWED_HOSTS, HOST, PORT, SECURITY_HEADERS, LOG_LEVEL, LOG_FORMAT
)
from airport_dashboard.web.api import airports, selection, viewport

logger = logging.getLogger(__name__)

ROUTERS = (airports, selection, viewport)


def _install(c: Optional[DashboardCoordinator]) -> None:
    for module in ROUTERS:
        module.set_coordinator(c)


def create_app(coordinator: Optional[DashboardCoordinator] = None) -> FastAPI:
    """
    Build the dashboard API.

    Args:
        coordinator: State to serve; a fresh one over the seed catalog is
            created at startup when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up Airport Dashboard...")
        try:
            c = coordinator if coordinator is not None else DashboardCoordinator()
        except Exception as e:
            logger.error(f"Failed to load airport catalog: {e}")
            raise
        app.state.coordinator = c
        _install(c)
        logger.info(f"Serving {len(c.catalog)} airports")

        yield

        logger.info("Shutting down Airport Dashboard...")
        _install(None)
        c.close()

    app = FastAPI(
        title="Airport Dashboard",
        description="Map and table views of airports kept in sync",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add security headers middleware
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        client_ip = request.client.host if request.client else "unknown"
        logger.info(
            f"{request.method} {request.url.path} - "
            f"{response.status_code} - {process_time:.3f}s - {client_ip}"
        )
        return response

    app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(airports.router, prefix="/api/airports", tags=["airports"])
    app.include_router(viewport.router, prefix="/api/viewport", tags=["viewport"])
    app.include_router(selection.router, prefix="/api", tags=["selection"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


def main():
    """Run the dashboard API with uvicorn."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO), format=LOG_FORMAT)
    uvicorn.run(
        create_app(),
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
