"""
OrderItemSearchRepository against a mocked AsyncElasticsearch: request shape and hit mapping.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from order_service.core.pagination import Order, PageRequest
from order_service.db.models.order_item import OrderItem
from order_service.search.elasticsearch_client import OrderItemSearchRepository, es_client_options


def _item() -> OrderItem:
    return OrderItem(
        id=4, order_id=1, product_id=1001, product_name="Mechanical keyboard",
        quantity=2, unit_price=Decimal("49.99"),
    )


@pytest.fixture
def es():
    client = MagicMock()
    client.index = AsyncMock()
    client.search = AsyncMock()
    client.indices.exists = AsyncMock(return_value=False)
    client.indices.create = AsyncMock()
    deleter = MagicMock()
    deleter.delete = AsyncMock()
    client.options.return_value = deleter
    return client


@pytest.mark.asyncio
async def test_save_indexes_document_by_string_id(es):
    await OrderItemSearchRepository(es, index="orderitem").save(_item())
    kwargs = es.index.await_args.kwargs
    assert kwargs["index"] == "orderitem"
    assert kwargs["id"] == "4"
    assert kwargs["document"]["unit_price"] == "49.99"


@pytest.mark.asyncio
async def test_delete_ignores_missing_document(es):
    await OrderItemSearchRepository(es, index="orderitem").delete(4)
    es.options.assert_called_once_with(ignore_status=404)
    es.options.return_value.delete.assert_awaited_once_with(index="orderitem", id="4")


@pytest.mark.asyncio
async def test_ensure_index_creates_when_absent(es):
    await OrderItemSearchRepository(es, index="orderitem").ensure_index()
    kwargs = es.indices.create.await_args.kwargs
    assert kwargs["index"] == "orderitem"
    assert kwargs["mappings"]["properties"]["unit_price"]["type"] == "scaled_float"


@pytest.mark.asyncio
async def test_search_uses_query_string_and_paging(es):
    es.search.return_value = {
        "hits": {
            "total": {"value": 11, "relation": "eq"},
            "hits": [{"_source": {
                "id": 4, "order_id": 1, "product_id": 1001,
                "product_name": "Mechanical keyboard", "quantity": 2, "unit_price": "49.99",
            }}],
        }
    }
    repo = OrderItemSearchRepository(es, index="orderitem")
    request = PageRequest(page=2, size=5, sort=(Order("product_name", "desc"),))
    page = await repo.search("keyboard", request)

    kwargs = es.search.await_args.kwargs
    assert kwargs["query"] == {"query_string": {"query": "keyboard"}}
    assert kwargs["from_"] == 10
    assert kwargs["size"] == 5
    assert kwargs["sort"] == [{"product_name.keyword": {"order": "desc"}}]
    assert kwargs["ignore_unavailable"] is True
    assert page.total == 11
    assert page.content[0].id == 4
    assert page.content[0].unit_price == Decimal("49.99")


@pytest.mark.asyncio
async def test_search_with_no_hits_is_empty_page(es):
    es.search.return_value = {"hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}}
    page = await OrderItemSearchRepository(es, index="orderitem").search("nothing", PageRequest())
    assert page.content == []
    assert page.total == 0


def test_client_options_move_credentials_out_of_url(monkeypatch):
    from order_service.search import elasticsearch_client

    monkeypatch.setattr(
        elasticsearch_client.settings, "elasticsearch_url", "https://elastic:pw@es.local:9200"
    )
    opts = es_client_options()
    assert opts["hosts"] == ["https://es.local:9200"]
    assert opts["basic_auth"] == ("elastic", "pw")
