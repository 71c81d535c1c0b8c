"""Vendor service — vendor CRUD plus the vendor → brands → products cascade.

Rule: No SQLAlchemy queries / no FastAPI here. Repositories do the DB work;
every service hands back *Out schemas, "not found" is reported as ``None`` /
``False`` and the router turns it into a 404.
"""


import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from watercane.core.exceptions import DuplicateNameError
from watercane.repositories.brand import BrandRepository
from watercane.repositories.product import ProductRepository
from watercane.repositories.vendor import VendorRepository
from watercane.schemas.vendor import VendorOut
from watercane.services.validation import require_text

logger = logging.getLogger(__name__)

class VendorService:
    def __init__(self, session: AsyncSession):
        self._repo = VendorRepository(session)
        self._brands = BrandRepository(session)
        self._products = ProductRepository(session)

    async def list_vendors(self) -> list[VendorOut]:
        vendors = await self._repo.list()
        logger.debug("Found %d vendors", len(vendors))
        return [VendorOut.model_validate(v) for v in vendors]

    async def get_vendor(self, vendor_id: str) -> VendorOut | None:
        vendor = await self._repo.get_by_id(vendor_id)
        return VendorOut.model_validate(vendor) if vendor is not None else None

    async def create_vendor(self, name: str, area: str, address: str) -> VendorOut:
        name = require_text(name, "name")
        area = require_text(area, "area")
        address = require_text(address, "address")

        if await self._repo.get_by_name(name) is not None:
            raise DuplicateNameError()
        try:
            vendor = await self._repo.create(name=name, area=area, address=address)
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same name
            raise DuplicateNameError() from exc
        logger.info("Vendor created: %s", vendor.name)
        return VendorOut.model_validate(vendor)

    async def update_vendor(
        self, vendor_id: str, name: str, area: str, address: str
    ) -> VendorOut | None:
        name = require_text(name, "name")
        area = require_text(area, "area")
        address = require_text(address, "address")

        if await self._repo.get_by_id(vendor_id) is None:
            return None
        clash = await self._repo.get_by_name(name)
        if clash is not None and clash.id != vendor_id:
            raise DuplicateNameError()
        try:
            vendor = await self._repo.update(vendor_id, name=name, area=area, address=address)
        except IntegrityError as exc:
            raise DuplicateNameError() from exc
        logger.info("Vendor updated: %s", name)
        return VendorOut.model_validate(vendor)

    async def delete_vendor(self, vendor_id: str) -> bool:
        """Delete the vendor, then its brands, then its products.

        The three deletes are separate statements issued in order; the
        caller's transaction decides whether they land together.
        """
        vendor = await self._repo.get_by_id(vendor_id)
        if vendor is None:
            return False

        logger.info("Deleting vendor: %s", vendor.name)
        await self._repo.delete(vendor_id)

        brands = await self._brands.delete_where(vendor_id=vendor_id)
        logger.info("Deleted %d brands", brands)

        products = await self._products.delete_where(vendor_id=vendor_id)
        logger.info("Deleted %d products", products)
        return True
