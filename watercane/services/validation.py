"""Field checks shared by the catalog services.

Request bodies are already validated by the Pydantic schemas; these guards
keep the services safe when they are called directly (scripts, tests).
"""

from __future__ import annotations

import math

from watercane.core.exceptions import ValidationError


def require_text(value: str | None, field: str) -> str:
    """Return ``value`` trimmed, or raise ValidationError when it is missing/blank."""
    if value is None or not isinstance(value, str):
        raise ValidationError(f"{field} is required")
    value = value.strip()
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def require_quantity(value) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError("quantity is required")
    try:
        qty = float(value)
    except (TypeError, ValueError):
        raise ValidationError("quantity must be a number") from None
    if math.isnan(qty) or math.isinf(qty):
        raise ValidationError("quantity must be a number")
    if qty < 0:
        raise ValidationError("quantity must not be negative")
    return qty
