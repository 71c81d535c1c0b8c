"""Brand Pydantic schemas."""

from watercane.schemas.common import CamelModel, NonEmptyStr, UtcDatetime

class BrandCreate(CamelModel):
    vendor_id: NonEmptyStr
    label: NonEmptyStr

class BrandUpdate(BrandCreate):
    pass

class BrandOut(CamelModel):
    id: str
    vendor_id: str
    vendor_name: str | None = None  # filled in at read time
    label: str
    created_at: UtcDatetime
    updated_at: UtcDatetime
