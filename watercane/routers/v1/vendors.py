"""Vendor CRUD router.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods, turn ``None`` / ``False`` into 404,
     and wrap the result in a response envelope
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from watercane.core.exceptions import NotFoundError
from watercane.core.response import DataResponse, ListResponse, MessageResponse, listed
from watercane.db.base import get_db
from watercane.schemas.vendor import VendorCreate, VendorOut, VendorUpdate
from watercane.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(session: AsyncSession = Depends(get_db)):
    """List all vendors, newest first."""
    vendors = await VendorService(session).list_vendors()
    return listed(vendors)


@router.post("", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    session: AsyncSession = Depends(get_db),
):
    """Create a new vendor. Names are unique."""
    vendor = await VendorService(session).create_vendor(body.name, body.area, body.address)
    return {"data": vendor}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    vendor = await VendorService(session).get_vendor(vendor_id)
    if vendor is None:
        raise NotFoundError("Vendor")
    return {"data": vendor}


@router.put("/{vendor_id}", response_model=DataResponse[VendorOut])
async def update_vendor(
    vendor_id: str,
    body: VendorUpdate,
    session: AsyncSession = Depends(get_db),
):
    vendor = await VendorService(session).update_vendor(
        vendor_id, body.name, body.area, body.address
    )
    if vendor is None:
        raise NotFoundError("Vendor")
    return {"data": vendor}


@router.delete("/{vendor_id}", response_model=MessageResponse)
async def delete_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Delete a vendor together with its brands and products."""
    if not await VendorService(session).delete_vendor(vendor_id):
        raise NotFoundError("Vendor")
    return MessageResponse(message="Vendor and associated data deleted successfully")
