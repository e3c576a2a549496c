"""
OrderItem repository - relational data access for order items.
"""

from sqlalchemy import select

from order_service.db.models.order_item import OrderItem
from order_service.db.repositories.base_repository import BaseRepository


class OrderItemRepository(BaseRepository[OrderItem]):
    """Order item queries on top of the generic CRUD."""

    def __init__(self, session):
        super().__init__(session, OrderItem)

    async def iter_batches(self, batch_size: int = 500):
        """Yield the whole table in id order, batch_size rows at a time (keyset paging).

        Clears the session identity map after each batch; only for sessions dedicated to the walk.
        """
        last_id = 0
        while True:
            result = await self.session.execute(
                select(OrderItem).where(OrderItem.id > last_id).order_by(OrderItem.id).limit(batch_size)
            )
            batch = list(result.scalars().all())
            if not batch:
                return
            yield batch
            last_id = batch[-1].id
            # Drop indexed rows so memory stays bounded by batch_size
            self.session.expunge_all()
