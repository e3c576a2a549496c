"""
Elasticsearch client and order item search repository.
Challenge: Index management, async operations, query_string search with paging.
Design: One shared AsyncElasticsearch per process; repository wraps it so tests can swap in a fake.
"""

import logging
from typing import Annotated, Any, Iterable
from urllib.parse import urlparse

from elasticsearch import AsyncElasticsearch, Elasticsearch
from elasticsearch.helpers import async_bulk
from fastapi import Depends

from order_service.config import get_settings
from order_service.core.pagination import Page, PageRequest
from order_service.db.models.order_item import OrderItem
from order_service.services.mapper import OrderItemMapper

logger = logging.getLogger(__name__)

settings = get_settings()

_es_client: AsyncElasticsearch | None = None

# Text fields sort on their keyword sub-field
_SORT_FIELDS = {"product_name": "product_name.keyword"}


def es_client_options() -> dict:
    """Build Elasticsearch client options from settings (supports HTTPS + basic auth in URL)."""
    url = settings.elasticsearch_url
    basic_auth = None
    parsed = urlparse(url)
    if parsed.username and parsed.password:
        basic_auth = (parsed.username, parsed.password)
        # Strip credentials from the host URL; the client takes them separately
        netloc = parsed.hostname or ""
        if parsed.port:
            netloc += f":{parsed.port}"
        url = f"{parsed.scheme}://{netloc}"
    opts = {
        "hosts": [url],
        "verify_certs": settings.elasticsearch_verify_certs,
        "request_timeout": 30,
    }
    if basic_auth:
        opts["basic_auth"] = basic_auth
    return opts


async def get_elasticsearch() -> AsyncElasticsearch:
    """Get the shared Elasticsearch client. Used as FastAPI dependency."""
    global _es_client
    if _es_client is None:
        _es_client = AsyncElasticsearch(**es_client_options())
    return _es_client


async def close_elasticsearch() -> None:
    global _es_client
    if _es_client is not None:
        await _es_client.close()
        _es_client = None


def sync_es_client() -> Elasticsearch:
    """Blocking client for scripts and Celery workers (no shared event loop there)."""
    return Elasticsearch(**es_client_options())


def order_item_index_mappings() -> dict:
    return {
        "properties": {
            "id": {"type": "long"},
            "order_id": {"type": "long"},
            "product_id": {"type": "long"},
            "product_name": {
                "type": "text",
                "analyzer": "standard",
                "fields": {"keyword": {"type": "keyword", "ignore_above": 256}},
            },
            "quantity": {"type": "integer"},
            "unit_price": {"type": "scaled_float", "scaling_factor": 100},
        }
    }


class OrderItemSearchRepository:
    """Derived, searchable copy of order items. The relational store stays the source of truth."""

    def __init__(self, es: AsyncElasticsearch, index: str | None = None):
        self.es = es
        self.index = index or settings.elasticsearch_index

    def _refresh(self) -> dict:
        return {"refresh": "wait_for"} if settings.elasticsearch_refresh else {}

    async def ensure_index(self) -> None:
        """Create index with mapping if not exists. Single-node: 0 replicas to avoid unassigned shards."""
        if not await self.es.indices.exists(index=self.index):
            logger.info("Creating Elasticsearch index %s", self.index)
            await self.es.indices.create(
                index=self.index,
                settings={"index": {"number_of_replicas": 0}},
                mappings=order_item_index_mappings(),
            )

    async def save(self, item: OrderItem) -> None:
        """Index (or re-index) one order item. ES 8 expects the document id as str."""
        await self.es.index(
            index=self.index,
            id=str(item.id),
            document=OrderItemMapper.to_document(item),
            **self._refresh(),
        )

    async def save_all(self, items: Iterable[OrderItem]) -> int:
        """Bulk index. Returns number of documents indexed."""
        actions = (
            {"_index": self.index, "_id": str(item.id), "_source": OrderItemMapper.to_document(item)}
            for item in items
        )
        success, _ = await async_bulk(self.es, actions, **self._refresh())
        return success

    async def delete(self, item_id: int) -> None:
        """Remove from index. A document that was never indexed is not an error."""
        await self.es.options(ignore_status=404).delete(
            index=self.index, id=str(item_id), **self._refresh()
        )

    async def search(self, query: str, request: PageRequest) -> Page[OrderItem]:
        """query_string search. Unknown index or no match yields an empty page."""
        kwargs: dict[str, Any] = {}
        if request.sort:
            kwargs["sort"] = [
                {_SORT_FIELDS.get(o.property, o.property): {"order": o.direction}}
                for o in request.sort
            ]
        response = await self.es.search(
            index=self.index,
            query={"query_string": {"query": query}},
            from_=request.offset,
            size=request.size,
            ignore_unavailable=True,
            **kwargs,
        )
        body = getattr(response, "body", response)
        hits = body["hits"]["hits"]
        total = body["hits"].get("total")
        total_val = total.get("value", len(hits)) if isinstance(total, dict) else len(hits)
        logger.debug("search: query=%r total=%d", query, total_val)
        return Page([OrderItemMapper.from_document(h["_source"]) for h in hits], total_val, request)


async def get_search_repository(
    es: Annotated[AsyncElasticsearch, Depends(get_elasticsearch)],
) -> OrderItemSearchRepository:
    return OrderItemSearchRepository(es)


SearchClient = Annotated[AsyncElasticsearch, Depends(get_elasticsearch)]
SearchRepository = Annotated[OrderItemSearchRepository, Depends(get_search_repository)]
