"""
FastAPI application entry point.
Mounts routes, CORS, Prometheus metrics; ensures the search index on startup.
"""

import logging
from contextlib import asynccontextmanager

from elasticsearch import ApiError, TransportError
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from order_service.api.router import api_router
from order_service.config import get_settings
from order_service.search.elasticsearch_client import (
    OrderItemSearchRepository,
    close_elasticsearch,
    get_elasticsearch,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: ensure the order item index when ES is available. Shutdown: close the ES client."""
    try:
        await OrderItemSearchRepository(await get_elasticsearch()).ensure_index()
    except (ApiError, TransportError) as e:
        # ES may be down at boot; CRUD still works, index writes fail until it is back
        logger.warning("Could not ensure search index at startup: %s", e)
    yield
    await close_elasticsearch()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        description="Order item resource: CRUD over PostgreSQL with an Elasticsearch search index.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "Location",
            "Link",
            "X-Total-Count",
            f"X-{settings.alert_app_name}-alert",
            f"X-{settings.alert_app_name}-error",
            f"X-{settings.alert_app_name}-params",
        ],
    )

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
