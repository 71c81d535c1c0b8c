"""Brand CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from watercane.core.exceptions import NotFoundError
from watercane.core.response import DataResponse, ListResponse, MessageResponse, listed
from watercane.db.base import get_db
from watercane.schemas.brand import BrandCreate, BrandOut, BrandUpdate
from watercane.services.brand import BrandService

router = APIRouter(prefix="/brands", tags=["Brands"])


@router.get("", response_model=ListResponse[BrandOut])
async def list_brands(session: AsyncSession = Depends(get_db)):
    """List all brands with their vendor's name, newest first."""
    return listed(await BrandService(session).list_brands())


@router.get("/vendor/{vendor_id}", response_model=ListResponse[BrandOut])
async def list_brands_by_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    return listed(await BrandService(session).list_brands_by_vendor(vendor_id))


@router.post("", response_model=DataResponse[BrandOut], status_code=status.HTTP_201_CREATED)
async def create_brand(
    body: BrandCreate,
    session: AsyncSession = Depends(get_db),
):
    brand = await BrandService(session).create_brand(body.vendor_id, body.label)
    return {"data": brand}


@router.get("/{brand_id}", response_model=DataResponse[BrandOut])
async def get_brand(
    brand_id: str,
    session: AsyncSession = Depends(get_db),
):
    brand = await BrandService(session).get_brand(brand_id)
    if brand is None:
        raise NotFoundError("Brand")
    return {"data": brand}


@router.put("/{brand_id}", response_model=DataResponse[BrandOut])
async def update_brand(
    brand_id: str,
    body: BrandUpdate,
    session: AsyncSession = Depends(get_db),
):
    brand = await BrandService(session).update_brand(brand_id, body.vendor_id, body.label)
    if brand is None:
        raise NotFoundError("Brand")
    return {"data": brand}


@router.delete("/{brand_id}", response_model=MessageResponse)
async def delete_brand(
    brand_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Delete a brand together with its products."""
    if not await BrandService(session).delete_brand(brand_id):
        raise NotFoundError("Brand")
    return MessageResponse(message="Brand and associated products deleted successfully")
