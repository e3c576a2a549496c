"""
Celery tasks - search index maintenance off the request path.
"""

import asyncio
import logging

from order_service.queue.celery_app import celery_app
from order_service.services.reindex import reindex_order_items

logger = logging.getLogger(__name__)


def _run_async(coro):
    """Run async function from sync Celery task."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@celery_app.task(bind=True, max_retries=3)
def reindex_order_items_task(self, batch_size: int = 500) -> int:
    """Copy every order item from the database into the search index."""
    try:
        count = _run_async(reindex_order_items(batch_size))
    except Exception as exc:
        logger.warning("reindex failed (attempt %d): %s", self.request.retries + 1, exc)
        raise self.retry(exc=exc, countdown=5)
    logger.info("reindex finished: %d order items", count)
    return count
