"""
OrderItem model - canonical persisted state of a line in an order.
"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from order_service.db.base import Base


class OrderItem(Base):
    """Order item entity. Source of truth; the search index holds a derived copy."""

    __tablename__ = "order_item"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Orders are owned by another service, so no foreign key here
    order_id: Mapped[int | None] = mapped_column(nullable=True, index=True)
    product_id: Mapped[int] = mapped_column(nullable=False, index=True)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(nullable=False, default=1)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<OrderItem(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"
