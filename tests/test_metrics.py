"""
Prometheus exposition - endpoint latency histogram served at /metrics.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_metrics_expose_request_latency(client: AsyncClient):
    await client.get("/api/order-items")
    response = await client.get("/metrics/")
    assert response.status_code == 200
    assert "order_service_request_seconds" in response.text
    assert 'order_service_request_seconds_count{endpoint="list_order_items"}' in response.text
