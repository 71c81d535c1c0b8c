"""Product repository."""


from watercane.domain.product import Product
from watercane.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    model = Product

    async def list_by_vendor(self, vendor_id: str) -> list[Product]:
        return await self.list(filters={"vendor_id": vendor_id})
