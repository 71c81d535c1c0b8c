"""
Unit tests for request / response schemas.
"""

import pydantic
import pytest

from watercane.schemas.brand import BrandOut
from watercane.schemas.product import ProductCreate
from watercane.schemas.vendor import VendorCreate


class TestVendorCreate:
    def test_strips_and_accepts_camel_or_snake(self):
        body = VendorCreate.model_validate({"name": " AquaCo ", "area": "North", "address": "1 Main St"})
        assert body.name == "AquaCo"

    def test_blank_field_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            VendorCreate.model_validate({"name": "   ", "area": "North", "address": "1 Main St"})


class TestProductCreate:
    def test_quantity_string_is_coerced(self):
        body = ProductCreate.model_validate({"vendorId": "v", "brandId": "b", "quantity": "12"})
        assert body.quantity == 12.0
        assert body.vendor_id == "v"

    @pytest.mark.parametrize("qty", ["twelve", -1, "nan"])
    def test_bad_quantity_rejected(self, qty):
        with pytest.raises(pydantic.ValidationError):
            ProductCreate.model_validate({"vendorId": "v", "brandId": "b", "quantity": qty})


def test_brand_out_serializes_camel_case():
    from datetime import datetime, timezone

    now = datetime.now(timezone.utc)
    out = BrandOut(
        id="b1", vendor_id="v1", vendor_name="AquaCo", label="SpringWater",
        created_at=now, updated_at=now,
    )
    dumped = out.model_dump(by_alias=True)
    assert dumped["vendorId"] == "v1"
    assert dumped["vendorName"] == "AquaCo"
    assert "createdAt" in dumped


def test_naive_timestamps_are_read_as_utc():
    from datetime import datetime, timezone

    from watercane.schemas.vendor import VendorOut

    naive = datetime(2026, 10, 19, 8, 53, 3)
    out = VendorOut(
        id="v1", name="AquaCo", area="North", address="1 Main St",
        created_at=naive, updated_at=naive,
    )

    assert out.created_at == naive.replace(tzinfo=timezone.utc)
    assert out.updated_at.tzinfo is not None
