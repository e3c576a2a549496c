"""
Health checks - for load balancers, Kubernetes, and monitoring.
Liveness is process-only; readiness checks the database and Elasticsearch.
"""

import logging

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from order_service.config import get_settings
from order_service.db.session import DbSession
from order_service.search.elasticsearch_client import SearchClient

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession, es: SearchClient, response: Response):
    """Readiness: 200 when both stores answer, 503 otherwise."""
    try:
        await session.execute(text("SELECT 1"))
        database = True
    except SQLAlchemyError as e:
        logger.warning("readiness: database check failed: %s", e)
        database = False
    search = bool(await es.ping())
    if not search:
        logger.warning("readiness: elasticsearch ping failed")
    if not (database and search):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unavailable", "database": database, "search": search}
    return {"status": "ready", "database": database, "search": search}
