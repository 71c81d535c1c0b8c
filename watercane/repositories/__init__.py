"""Repositories package — the only layer that talks SQL.

Files:
  base.py     — generic async CRUD (get, list, create, update, delete, delete_where)
  vendor.py   — VendorRepository (+ lookup by name, id -> name map)
  brand.py    — BrandRepository (+ filter by vendor, id -> label map)
  product.py  — ProductRepository (+ filter by vendor)
"""
