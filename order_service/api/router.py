"""
API router - aggregates all endpoint modules (mounted under /api).
"""

from fastapi import APIRouter

from order_service.api.endpoints import health, order_items, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(order_items.router, tags=["order-items"])
api_router.include_router(search.router, prefix="/_search", tags=["search"])
