"""
FastAPI App Factory

Shared app setup for the fleet service and the test client.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.fleet.driving_adapter.http_controller.bus_controller import (
    router as bus_router,
)
from src.service.fleet.driving_adapter.http_controller.bus_diagram_model_controller import (
    router as bus_diagram_model_router,
)
from src.service.fleet.driving_adapter.http_controller.bus_model_controller import (
    router as bus_model_router,
)
from src.service.fleet.driving_adapter.http_controller.seat_diagram_controller import (
    router as seat_diagram_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Fleet inventory: buses, bus models and seat diagrams',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(bus_router, prefix='/buses', tags=['bus'])
    app.include_router(bus_model_router, prefix='/bus-models', tags=['bus-model'])
    app.include_router(
        bus_diagram_model_router, prefix='/bus-diagram-models', tags=['bus-diagram-model']
    )
    app.include_router(seat_diagram_router, prefix='/seat-diagrams', tags=['seat-diagram'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
