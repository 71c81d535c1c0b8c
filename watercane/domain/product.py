"""SQLAlchemy ORM model for Products."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from watercane.db.base import Base
from watercane.domain.mixins import IdMixin, TimestampMixin


class Product(Base, IdMixin, TimestampMixin):
    __tablename__ = "products"
    __table_args__ = (CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),)

    # References to vendors.id / brands.id (checked by ProductService)
    vendor_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    brand_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Product {self.id} brand={self.brand_id} qty={self.quantity}>"
