"""Brand service — brand CRUD, vendor checks and the brand → products cascade."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from watercane.core.exceptions import VendorNotFoundError
from watercane.domain.brand import Brand
from watercane.repositories.brand import BrandRepository
from watercane.repositories.product import ProductRepository
from watercane.repositories.vendor import VendorRepository
from watercane.schemas.brand import BrandOut
from watercane.services.validation import require_text

logger = logging.getLogger(__name__)

class BrandService:
    def __init__(self, session: AsyncSession):
        self._repo = BrandRepository(session)
        self._vendors = VendorRepository(session)
        self._products = ProductRepository(session)

    async def _enrich(self, brands: list[Brand]) -> list[BrandOut]:
        """Attach the owning vendor's name to each brand (one lookup query)."""
        names = await self._vendors.names_by_ids(b.vendor_id for b in brands)
        return [
            BrandOut.model_validate(b).model_copy(update={"vendor_name": names.get(b.vendor_id)})
            for b in brands
        ]

    async def _enrich_one(self, brand: Brand) -> BrandOut:
        return (await self._enrich([brand]))[0]

    async def list_brands(self) -> list[BrandOut]:
        return await self._enrich(await self._repo.list())

    async def list_brands_by_vendor(self, vendor_id: str) -> list[BrandOut]:
        return await self._enrich(await self._repo.list_by_vendor(vendor_id))

    async def get_brand(self, brand_id: str) -> BrandOut | None:
        brand = await self._repo.get_by_id(brand_id)
        if brand is None:
            return None
        return await self._enrich_one(brand)

    async def create_brand(self, vendor_id: str, label: str) -> BrandOut:
        vendor_id = require_text(vendor_id, "vendorId")
        label = require_text(label, "label")

        vendor = await self._vendors.get_by_id(vendor_id)
        if vendor is None:
            raise VendorNotFoundError()

        brand = await self._repo.create(vendor_id=vendor_id, label=label)
        logger.info("Brand created: %s for vendor: %s", brand.label, vendor.name)
        return await self._enrich_one(brand)

    async def update_brand(self, brand_id: str, vendor_id: str, label: str) -> BrandOut | None:
        # Products already pointing at this brand keep their old vendor_id.
        vendor_id = require_text(vendor_id, "vendorId")
        label = require_text(label, "label")

        if not await self._vendors.exists(vendor_id):
            raise VendorNotFoundError()

        brand = await self._repo.update(brand_id, vendor_id=vendor_id, label=label)
        if brand is None:
            return None
        logger.info("Brand updated: %s", brand.label)
        return await self._enrich_one(brand)

    async def delete_brand(self, brand_id: str) -> bool:
        brand = await self._repo.get_by_id(brand_id)
        if brand is None:
            return False

        logger.info("Deleting brand: %s", brand.label)
        await self._repo.delete(brand_id)

        products = await self._products.delete_where(brand_id=brand_id)
        logger.info("Deleted %d products", products)
        return True
