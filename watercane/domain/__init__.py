"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py   — Vendor (unique name, area, address)
  brand.py    — Brand, references a vendor
  product.py  — Product, references a vendor and one of that vendor's brands
  mixins.py   — Shared IdMixin, TimestampMixin
"""

from watercane.domain.brand import Brand
from watercane.domain.product import Product
from watercane.domain.vendor import Vendor

__all__ = [
    "Brand",
    "Product",
    "Vendor",
]
