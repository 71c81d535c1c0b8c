"""Product Pydantic schemas."""

from pydantic import Field

from watercane.schemas.common import CamelModel, NonEmptyStr, UtcDatetime

class ProductCreate(CamelModel):
    vendor_id: NonEmptyStr
    brand_id: NonEmptyStr
    # Numeric strings such as "12" are coerced; NaN / inf are rejected
    quantity: float = Field(ge=0, allow_inf_nan=False)

class ProductUpdate(ProductCreate):
    pass

class ProductOut(CamelModel):
    id: str
    vendor_id: str
    vendor_name: str | None = None
    brand_id: str
    brand_label: str | None = None
    quantity: float
    created_at: UtcDatetime
    updated_at: UtcDatetime
