"""
Request field checks shared by the routers.

Everything here raises GatewayError (-> 400) so a bad request never reaches PayDunya.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Union

from paycash.core.exceptions import GatewayError

# Upper bound for a single charge or payout, keeps amounts JSON-encodable
MAX_AMOUNT = Decimal("1000000000000")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise GatewayError listing every required field that is absent or empty."""
    missing = [name for name in fields if is_blank(data.get(name))]
    if missing:
        raise GatewayError(f"Missing required fields: {', '.join(missing)}")


def parse_amount(value: Any) -> Union[int, float]:
    """
    Normalize an amount to a JSON-friendly positive number.

    Accepts ints, floats and numeric strings; booleans, NaN/inf, zero,
    negatives and anything above MAX_AMOUNT are rejected. Whole amounts come
    back as int.
    """
    if isinstance(value, bool):
        raise GatewayError("amount must be a positive number")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise GatewayError("amount must be a positive number")
    if not amount.is_finite() or amount <= 0:
        raise GatewayError("amount must be a positive number")
    if amount > MAX_AMOUNT:
        raise GatewayError(f"amount must not exceed {MAX_AMOUNT:,}")
    if amount == amount.to_integral_value():
        return int(amount)
    normalized = float(amount)
    if normalized <= 0:
        raise GatewayError("amount must be a positive number")
    return normalized
