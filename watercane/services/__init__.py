"""Services package — the catalog store. All business logic lives here, never in routers.

Files:
  vendor.py      — VendorService (unique names, vendor → brands → products cascade)
  brand.py       — BrandService (vendor must exist, brand → products cascade)
  product.py     — ProductService (vendor/brand existence + ownership check)
  validation.py  — required-text / quantity guards shared by the services

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
