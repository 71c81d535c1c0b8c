"""Product service — product CRUD guarded by the vendor/brand ownership check."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from watercane.core.exceptions import (
    BrandNotFoundError,
    OwnershipMismatchError,
    VendorNotFoundError,
)
from watercane.domain.brand import Brand
from watercane.domain.product import Product
from watercane.domain.vendor import Vendor
from watercane.repositories.brand import BrandRepository
from watercane.repositories.product import ProductRepository
from watercane.repositories.vendor import VendorRepository
from watercane.schemas.product import ProductOut
from watercane.services.validation import require_quantity, require_text

logger = logging.getLogger(__name__)

class ProductService:
    def __init__(self, session: AsyncSession):
        self._repo = ProductRepository(session)
        self._vendors = VendorRepository(session)
        self._brands = BrandRepository(session)

    async def _check_references(self, vendor_id: str, brand_id: str) -> tuple[Vendor, Brand]:
        """Vendor must exist, brand must exist, and the brand must be that vendor's."""
        vendor = await self._vendors.get_by_id(vendor_id)
        if vendor is None:
            raise VendorNotFoundError()

        brand = await self._brands.get_by_id(brand_id)
        if brand is None:
            raise BrandNotFoundError()

        if brand.vendor_id != vendor_id:
            raise OwnershipMismatchError()
        return vendor, brand

    async def _enrich(self, products: list[Product]) -> list[ProductOut]:
        names = await self._vendors.names_by_ids(p.vendor_id for p in products)
        labels = await self._brands.labels_by_ids(p.brand_id for p in products)
        return [
            ProductOut.model_validate(p).model_copy(
                update={
                    "vendor_name": names.get(p.vendor_id),
                    "brand_label": labels.get(p.brand_id),
                }
            )
            for p in products
        ]

    async def _enrich_one(self, product: Product) -> ProductOut:
        return (await self._enrich([product]))[0]

    async def list_products(self) -> list[ProductOut]:
        products = await self._repo.list()
        logger.debug("Found %d products", len(products))
        return await self._enrich(products)

    async def list_products_by_vendor(self, vendor_id: str) -> list[ProductOut]:
        return await self._enrich(await self._repo.list_by_vendor(vendor_id))

    async def get_product(self, product_id: str) -> ProductOut | None:
        product = await self._repo.get_by_id(product_id)
        if product is None:
            return None
        return await self._enrich_one(product)

    async def create_product(self, vendor_id: str, brand_id: str, quantity) -> ProductOut:
        vendor_id = require_text(vendor_id, "vendorId")
        brand_id = require_text(brand_id, "brandId")
        quantity = require_quantity(quantity)

        vendor, brand = await self._check_references(vendor_id, brand_id)

        product = await self._repo.create(
            vendor_id=vendor_id, brand_id=brand_id, quantity=quantity
        )
        logger.info("Product created: %s x%s for vendor: %s", brand.label, quantity, vendor.name)
        return await self._enrich_one(product)

    async def update_product(
        self, product_id: str, vendor_id: str, brand_id: str, quantity
    ) -> ProductOut | None:
        vendor_id = require_text(vendor_id, "vendorId")
        brand_id = require_text(brand_id, "brandId")
        quantity = require_quantity(quantity)

        _, brand = await self._check_references(vendor_id, brand_id)

        product = await self._repo.update(
            product_id, vendor_id=vendor_id, brand_id=brand_id, quantity=quantity
        )
        if product is None:
            return None
        logger.info("Product updated: %s", brand.label)
        return await self._enrich_one(product)

    async def delete_product(self, product_id: str) -> bool:
        deleted = await self._repo.delete(product_id)
        if deleted:
            logger.info("Product deleted: %s", product_id)
        return deleted
