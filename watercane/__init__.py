"""WaterCane catalog API — vendors, brands and products."""
