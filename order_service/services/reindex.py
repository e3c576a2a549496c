"""
Rebuild the order item search index from the relational store.
Used after index loss, mapping changes, or to repair drift left by a failed dual write.
"""

import logging

from elasticsearch import AsyncElasticsearch
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from order_service.config import get_settings
from order_service.db.repositories.order_item_repository import OrderItemRepository
from order_service.search.elasticsearch_client import OrderItemSearchRepository, es_client_options

logger = logging.getLogger(__name__)


async def copy_to_index(
    repo: OrderItemRepository,
    search_repo: OrderItemSearchRepository,
    batch_size: int = 500,
) -> int:
    """Bulk index every order item, batch by batch. Returns number indexed."""
    total = 0
    async for batch in repo.iter_batches(batch_size):
        total += await search_repo.save_all(batch)
        logger.info("Reindexed %d order items", total)
    return total


async def reindex_order_items(batch_size: int = 500) -> int:
    """Standalone reindex with its own engine and client (safe to call from a fresh event loop)."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url)
    es = AsyncElasticsearch(**es_client_options())
    try:
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        async with session_maker() as session:
            search_repo = OrderItemSearchRepository(es)
            await search_repo.ensure_index()
            return await copy_to_index(OrderItemRepository(session), search_repo, batch_size)
    finally:
        await es.close()
        await engine.dispose()
