"""
Search endpoint - Elasticsearch query_string search over order items.
"""

import logging

from fastapi import APIRouter, Query, Response

from order_service.api.endpoints.order_items import OrderItemServiceDep, Pageable
from order_service.core.metrics import timed
from order_service.core.pagination import search_pagination_headers
from order_service.schemas.order_item import OrderItemDTO

logger = logging.getLogger(__name__)

router = APIRouter()

BASE_URL = "/api/_search/order-items"


@router.get("/order-items", response_model=list[OrderItemDTO])
@timed("search_order_items")
async def search_order_items(
    svc: OrderItemServiceDep,
    pageable: Pageable,
    response: Response,
    query: str = Query(...),
):
    """Free-text search, e.g. ?query=product_name:keyboard AND quantity:>2."""
    logger.debug("REST request to search for a page of OrderItems for query %s", query)
    page = await svc.search(query, pageable)
    response.headers.update(search_pagination_headers(query, page, BASE_URL))
    return page.content
