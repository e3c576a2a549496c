"""
Order item service - sequences mapper, relational repository and search index.
Design: store first (flush), index second; the two writes are not transactional. A commit
failure after the index write leaves the index ahead of the store until the next reindex.
"""

from order_service.core.pagination import Page, PageRequest
from order_service.db.repositories.order_item_repository import OrderItemRepository
from order_service.schemas.order_item import OrderItemDTO
from order_service.search.elasticsearch_client import OrderItemSearchRepository
from order_service.services.mapper import OrderItemMapper


class OrderItemService:
    """Order item use cases: save, fetch, list, delete, search."""

    def __init__(self, repo: OrderItemRepository, search_repo: OrderItemSearchRepository):
        self.repo = repo
        self.search_repo = search_repo
        self.mapper = OrderItemMapper()

    async def save(self, dto: OrderItemDTO) -> OrderItemDTO:
        """Insert when dto.id is None, upsert by id otherwise; then re-index."""
        entity = await self.repo.save(self.mapper.to_entity(dto))
        result = self.mapper.to_dto(entity)
        await self.search_repo.save(entity)
        return result

    async def find_all(self, request: PageRequest) -> Page[OrderItemDTO]:
        page = await self.repo.get_page(request)
        return page.map(self.mapper.to_dto)

    async def find_one(self, id: int) -> OrderItemDTO | None:
        return self.mapper.to_dto(await self.repo.get_by_id(id))

    async def delete(self, id: int) -> None:
        await self.repo.delete_by_id(id)
        await self.search_repo.delete(id)

    async def search(self, query: str, request: PageRequest) -> Page[OrderItemDTO]:
        page = await self.search_repo.search(query, request)
        return page.map(self.mapper.to_dto)
