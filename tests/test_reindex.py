"""
Reindex tests - database rows copied to the search index in batches.
"""

from decimal import Decimal

import pytest

from order_service.db.models.order_item import OrderItem
from order_service.db.repositories.order_item_repository import OrderItemRepository
from order_service.services.reindex import copy_to_index


@pytest.mark.asyncio
async def test_copy_to_index_walks_all_batches(session, search_repo):
    repo = OrderItemRepository(session)
    ids = []
    for n in range(7):
        item = await repo.add(OrderItem(
            product_id=n, product_name=f"Product {n}", quantity=1, unit_price=Decimal("1.50"),
        ))
        ids.append(item.id)

    count = await copy_to_index(repo, search_repo, batch_size=3)

    assert count == 7
    assert sorted(search_repo.documents) == ids
    assert search_repo.documents[ids[0]]["unit_price"] == "1.50"


@pytest.mark.asyncio
async def test_copy_to_index_releases_rows_between_batches(session, search_repo):
    repo = OrderItemRepository(session)
    for n in range(7):
        await repo.add(OrderItem(
            product_id=n, product_name=f"Product {n}", quantity=1, unit_price=Decimal("2.00"),
        ))

    held = []
    async for batch in repo.iter_batches(batch_size=3):
        held.append(len(session.identity_map))
        await search_repo.save_all(batch)

    # First batch still sees the rows added above; later ones only their own
    assert held[1:] == [3, 1]
    assert len(session.identity_map) == 0
    assert len(search_repo.documents) == 7


@pytest.mark.asyncio
async def test_copy_to_index_on_empty_table(session, search_repo):
    assert await copy_to_index(OrderItemRepository(session), search_repo) == 0
    assert search_repo.documents == {}
