"""SQLAlchemy ORM model for Brands."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from watercane.db.base import Base
from watercane.domain.mixins import IdMixin, TimestampMixin


class Brand(Base, IdMixin, TimestampMixin):
    __tablename__ = "brands"

    # Reference to vendors.id (checked by BrandService, not by the database)
    vendor_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Brand {self.id} {self.label!r}>"
