"""Product CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from watercane.core.exceptions import NotFoundError
from watercane.core.response import DataResponse, ListResponse, MessageResponse, listed
from watercane.db.base import get_db
from watercane.schemas.product import ProductCreate, ProductOut, ProductUpdate
from watercane.services.product import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ListResponse[ProductOut])
async def list_products(session: AsyncSession = Depends(get_db)):
    """List all products with vendor name and brand label, newest first."""
    return listed(await ProductService(session).list_products())


@router.get("/vendor/{vendor_id}", response_model=ListResponse[ProductOut])
async def list_products_by_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    return listed(await ProductService(session).list_products_by_vendor(vendor_id))


@router.post("", response_model=DataResponse[ProductOut], status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    session: AsyncSession = Depends(get_db),
):
    product = await ProductService(session).create_product(
        body.vendor_id, body.brand_id, body.quantity
    )
    return {"data": product}


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def get_product(
    product_id: str,
    session: AsyncSession = Depends(get_db),
):
    product = await ProductService(session).get_product(product_id)
    if product is None:
        raise NotFoundError("Product")
    return {"data": product}


@router.put("/{product_id}", response_model=DataResponse[ProductOut])
async def update_product(
    product_id: str,
    body: ProductUpdate,
    session: AsyncSession = Depends(get_db),
):
    product = await ProductService(session).update_product(
        product_id, body.vendor_id, body.brand_id, body.quantity
    )
    if product is None:
        raise NotFoundError("Product")
    return {"data": product}


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    session: AsyncSession = Depends(get_db),
):
    if not await ProductService(session).delete_product(product_id):
        raise NotFoundError("Product")
    return MessageResponse(message="Product deleted successfully")
