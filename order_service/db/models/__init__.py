from order_service.db.models.order_item import OrderItem

__all__ = ["OrderItem"]
