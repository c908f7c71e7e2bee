from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..core.constants import AMOUNT_LIMIT
from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: Mapping[str, Any], fields: tuple[str, ...], message: str) -> None:
    """Raise one ValidationError naming all required fields when any is missing."""
    if any(is_blank(data.get(f)) for f in fields):
        raise ValidationError(message)


def require_non_empty(value: Any, field_name: str) -> str:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_str(value: Any) -> Optional[str]:
    if is_blank(value):
        return None
    return str(value).strip()


def parse_amount(value: Any, field_name: str, *, allow_zero: bool = False) -> Decimal:
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")

    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if abs(amount) < AMOUNT_LIMIT:
        amount = amount.quantize(Decimal("0.01"))
    if amount >= AMOUNT_LIMIT:
        raise ValidationError(f"{field_name} is too large")
    if amount < 0 or (amount == 0 and not allow_zero):
        raise ValidationError(f"{field_name} must be {'non-negative' if allow_zero else 'positive'}")
    return amount


def parse_id(value: Any, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return parsed
