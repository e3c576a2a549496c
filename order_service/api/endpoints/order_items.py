"""
Order item CRUD endpoints - RESTful resource (POST/PUT/GET/DELETE).
Design: Thin controller; guard checks and headers here, the service does map -> persist -> index.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from order_service.core import header_util
from order_service.core.metrics import timed
from order_service.core.pagination import PageRequest, page_request_dependency, pagination_headers
from order_service.db.repositories.order_item_repository import OrderItemRepository
from order_service.db.session import DbSession
from order_service.schemas.order_item import SORTABLE_FIELDS, OrderItemDTO
from order_service.search.elasticsearch_client import SearchRepository
from order_service.services.order_item_service import OrderItemService

logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "orderItem"
BASE_URL = "/api/order-items"

Pageable = Annotated[PageRequest, Depends(page_request_dependency(SORTABLE_FIELDS))]


def _get_order_item_service(session: DbSession, search_repo: SearchRepository) -> OrderItemService:
    return OrderItemService(OrderItemRepository(session), search_repo)


OrderItemServiceDep = Annotated[OrderItemService, Depends(_get_order_item_service)]


async def _create(svc: OrderItemService, dto: OrderItemDTO, response: Response) -> OrderItemDTO:
    if dto.id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A new orderItem cannot already have an ID",
            headers=header_util.failure_alert(
                ENTITY_NAME, "idexists", "A new orderItem cannot already have an ID"
            ),
        )
    result = await svc.save(dto)
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{BASE_URL}/{result.id}"
    response.headers.update(header_util.entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.post("/order-items", response_model=OrderItemDTO, status_code=status.HTTP_201_CREATED)
@timed("create_order_item")
async def create_order_item(svc: OrderItemServiceDep, dto: OrderItemDTO, response: Response):
    """Create order item. 201 + Location, or 400 if the body already carries an id."""
    logger.debug("REST request to save OrderItem : %s", dto)
    return await _create(svc, dto, response)


@router.put("/order-items", response_model=OrderItemDTO)
@timed("update_order_item")
async def update_order_item(svc: OrderItemServiceDep, dto: OrderItemDTO, response: Response):
    """Update by id. Without an id this is a create and answers 201; an id with no row
    is stored under a newly generated id, returned in the body."""
    logger.debug("REST request to update OrderItem : %s", dto)
    if dto.id is None:
        return await _create(svc, dto, response)
    result = await svc.save(dto)
    response.headers.update(header_util.entity_update_alert(ENTITY_NAME, str(result.id)))
    return result


@router.get("/order-items", response_model=list[OrderItemDTO])
@timed("list_order_items")
async def list_order_items(svc: OrderItemServiceDep, pageable: Pageable, response: Response):
    """One page of order items. REST: GET /order-items?page=0&size=20&sort=id,desc."""
    logger.debug("REST request to get a page of OrderItems")
    page = await svc.find_all(pageable)
    response.headers.update(pagination_headers(page, BASE_URL))
    return page.content


@router.get("/order-items/{id}", response_model=OrderItemDTO)
@timed("get_order_item")
async def get_order_item(svc: OrderItemServiceDep, id: int):
    logger.debug("REST request to get OrderItem : %s", id)
    dto = await svc.find_one(id)
    if dto is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order item not found")
    return dto


@router.delete("/order-items/{id}", response_class=Response)
@timed("delete_order_item")
async def delete_order_item(svc: OrderItemServiceDep, id: int):
    """Delete from the database, then from the search index."""
    logger.debug("REST request to delete OrderItem : %s", id)
    await svc.delete(id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_util.entity_deletion_alert(ENTITY_NAME, str(id)),
    )
