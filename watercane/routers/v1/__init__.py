"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vendors.py   — /vendors
  brands.py    — /brands, /brands/vendor/{vendorId}
  products.py  — /products, /products/vendor/{vendorId}

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to watercane/services/.
"""
