"""Pydantic schemas package.

Folder intent:
  common.py   — CamelModel base, NonEmptyStr, HealthResponse (all schemas inherit CamelModel)
  vendor.py   — VendorCreate / VendorUpdate / VendorOut
  brand.py    — BrandCreate / BrandUpdate / BrandOut (with vendorName)
  product.py  — ProductCreate / ProductUpdate / ProductOut (with vendorName, brandLabel)
"""
