"""Vendor repository."""


from sqlalchemy import select

from watercane.domain.vendor import Vendor
from watercane.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def get_by_name(self, name: str) -> Vendor | None:
        result = await self._session.execute(select(Vendor).where(Vendor.name == name))
        return result.scalars().first()

    async def names_by_ids(self, ids) -> dict[str, str]:
        return await self.column_by_ids("name", ids)
