"""
Tests for BrandService: vendor checks, enrichment and the brand cascade.
"""

import pytest

from watercane.core.exceptions import OwnershipMismatchError, VendorNotFoundError

MISSING_ID = "6f1c2d9e-0000-4000-8000-000000000000"


class TestCreateBrand:
    async def test_create_brand_enriched_with_vendor_name(self, brand_service, sample_vendor):
        brand = await brand_service.create_brand(sample_vendor.id, "SpringWater")

        assert brand.vendor_id == sample_vendor.id
        assert brand.vendor_name == "AquaCo"
        assert brand.label == "SpringWater"

    async def test_unknown_vendor_is_rejected(self, brand_service):
        with pytest.raises(VendorNotFoundError) as exc_info:
            await brand_service.create_brand(MISSING_ID, "SpringWater")
        assert exc_info.value.message == "Vendor not found"

    async def test_round_trip(self, brand_service, sample_brand):
        fetched = await brand_service.get_brand(sample_brand.id)
        assert fetched.label == sample_brand.label
        assert fetched.vendor_id == sample_brand.vendor_id


class TestListBrands:
    async def test_list_and_filter_by_vendor(self, vendor_service, brand_service, sample_vendor):
        other = await vendor_service.create_vendor("BlueCo", "South", "2 Oak St")
        a = await brand_service.create_brand(sample_vendor.id, "SpringWater")
        b = await brand_service.create_brand(other.id, "Glacier")
        c = await brand_service.create_brand(sample_vendor.id, "Sparkling")

        everything = await brand_service.list_brands()
        mine = await brand_service.list_brands_by_vendor(sample_vendor.id)

        assert [x.id for x in everything] == [c.id, b.id, a.id]
        assert [x.id for x in mine] == [c.id, a.id]
        assert {x.vendor_name for x in mine} == {"AquaCo"}

    async def test_get_missing_brand_returns_none(self, brand_service):
        assert await brand_service.get_brand(MISSING_ID) is None


class TestUpdateBrand:
    async def test_update_label(self, brand_service, sample_brand):
        updated = await brand_service.update_brand(sample_brand.id, sample_brand.vendor_id, "Still")

        assert updated.label == "Still"
        assert updated.vendor_name == "AquaCo"

    async def test_unknown_new_vendor_is_rejected(self, brand_service, sample_brand):
        with pytest.raises(VendorNotFoundError):
            await brand_service.update_brand(sample_brand.id, MISSING_ID, "Still")

    async def test_vendor_checked_before_brand_existence(self, brand_service):
        with pytest.raises(VendorNotFoundError):
            await brand_service.update_brand(MISSING_ID, MISSING_ID, "Still")

    async def test_missing_brand_returns_none(self, brand_service, sample_vendor):
        assert await brand_service.update_brand(MISSING_ID, sample_vendor.id, "Still") is None

    async def test_repointing_brand_leaves_existing_products_untouched(
        self, vendor_service, brand_service, product_service, sample_vendor, sample_brand
    ):
        product = await product_service.create_product(sample_vendor.id, sample_brand.id, 4)
        other = await vendor_service.create_vendor("BlueCo", "South", "2 Oak St")

        moved = await brand_service.update_brand(sample_brand.id, other.id, sample_brand.label)

        assert moved.vendor_name == "BlueCo"
        stale = await product_service.get_product(product.id)
        assert stale.vendor_id == sample_vendor.id
        with pytest.raises(OwnershipMismatchError):
            await product_service.update_product(product.id, sample_vendor.id, sample_brand.id, 5)


class TestDeleteBrand:
    async def test_delete_missing_brand_returns_false(self, brand_service):
        assert await brand_service.delete_brand(MISSING_ID) is False

    async def test_delete_cascades_to_products_only(
        self, vendor_service, brand_service, product_service, sample_vendor, sample_brand
    ):
        keep_brand = await brand_service.create_brand(sample_vendor.id, "Sparkling")
        await product_service.create_product(sample_vendor.id, sample_brand.id, 1)
        kept = await product_service.create_product(sample_vendor.id, keep_brand.id, 2)

        assert await brand_service.delete_brand(sample_brand.id) is True

        assert await brand_service.get_brand(sample_brand.id) is None
        remaining = await product_service.list_products()
        assert [p.id for p in remaining] == [kept.id]
        assert all(p.brand_id != sample_brand.id for p in remaining)
        assert await vendor_service.get_vendor(sample_vendor.id) is not None
