# Repository pattern: data access behind a small async interface

from order_service.db.repositories.order_item_repository import OrderItemRepository

__all__ = ["OrderItemRepository"]
