"""Brand repository."""


from watercane.domain.brand import Brand
from watercane.repositories.base import BaseRepository


class BrandRepository(BaseRepository[Brand]):
    model = Brand

    async def list_by_vendor(self, vendor_id: str) -> list[Brand]:
        return await self.list(filters={"vendor_id": vendor_id})

    async def labels_by_ids(self, ids) -> dict[str, str]:
        return await self.column_by_ids("label", ids)
