"""
OrderItem mapper - converts between API DTO, ORM entity and search document.
Stateless; no I/O.
"""

from decimal import Decimal
from typing import Any

from order_service.db.models.order_item import OrderItem
from order_service.schemas.order_item import OrderItemDTO

_FIELDS = ("order_id", "product_id", "product_name", "quantity", "unit_price")


class OrderItemMapper:
    """Bidirectional DTO <-> entity mapping, plus entity <-> Elasticsearch document."""

    @staticmethod
    def to_entity(dto: OrderItemDTO) -> OrderItem:
        data = {name: getattr(dto, name) for name in _FIELDS}
        # Leave id unset (not None) so the database assigns it on insert
        if dto.id is not None:
            data["id"] = dto.id
        return OrderItem(**data)

    @staticmethod
    def to_dto(entity: OrderItem | None) -> OrderItemDTO | None:
        if entity is None:
            return None
        return OrderItemDTO.model_validate(entity)

    @staticmethod
    def to_document(entity: OrderItem) -> dict[str, Any]:
        """Search document. unit_price as string so it round-trips without float error."""
        return {
            "id": entity.id,
            "order_id": entity.order_id,
            "product_id": entity.product_id,
            "product_name": entity.product_name,
            "quantity": entity.quantity,
            "unit_price": str(entity.unit_price),
        }

    @staticmethod
    def from_document(doc: dict[str, Any]) -> OrderItem:
        """Rebuild a detached entity from an indexed ``_source``."""
        return OrderItem(
            id=int(doc["id"]),
            order_id=doc.get("order_id"),
            product_id=doc["product_id"],
            product_name=doc["product_name"],
            quantity=doc["quantity"],
            unit_price=Decimal(str(doc["unit_price"])),
        )
