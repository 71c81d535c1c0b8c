"""SQLAlchemy ORM model for Vendors.

Vendors are the top of the catalog hierarchy. Brands and products point at
a vendor through a plain ``vendor_id`` column; there is no database-level
foreign key, so removing a vendor's dependents is the job of
:class:`watercane.services.vendor.VendorService`.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from watercane.db.base import Base
from watercane.domain.mixins import IdMixin, TimestampMixin


class Vendor(Base, IdMixin, TimestampMixin):
    __tablename__ = "vendors"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    area: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)

    def __repr__(self) -> str:
        return f"<Vendor {self.id} {self.name!r}>"
