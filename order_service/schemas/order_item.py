"""Order item transfer schema - REST API contract."""

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItemDTO(BaseModel):
    """Boundary representation of an order item. ``id`` is server-assigned."""

    id: int | None = Field(None, gt=0)
    order_id: int | None = None
    product_id: int
    product_name: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)

    model_config = {"from_attributes": True}


# Properties clients may pass as ?sort=<property>,<direction>
SORTABLE_FIELDS = frozenset(OrderItemDTO.model_fields)
