"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finboard.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finboard.api.v1 import budget, reports, restaurant
from finboard.infrastructure.database.models import Base
from finboard.infrastructure.database.session import engine
from finboard.infrastructure.observability.logging import setup_logging
from finboard.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finboard",
        description="Budget tracking and restaurant finance dashboards",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(budget.router, prefix="/v1", tags=["budget"])
    app.include_router(restaurant.router, prefix="/v1", tags=["restaurant"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])

    return app


app = create_app()
