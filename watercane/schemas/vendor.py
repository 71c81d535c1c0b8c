"""Vendor Pydantic schemas (request DTOs and response models)."""

from watercane.schemas.common import CamelModel, NonEmptyStr, UtcDatetime

class VendorCreate(CamelModel):
    name: NonEmptyStr
    area: NonEmptyStr
    address: NonEmptyStr

class VendorUpdate(VendorCreate):
    """PUT replaces every field, so the shape matches VendorCreate."""

class VendorOut(CamelModel):
    id: str
    name: str
    area: str
    address: str
    created_at: UtcDatetime
    updated_at: UtcDatetime
