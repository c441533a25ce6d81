"""Exact conversion between whole token units and atomic units."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext

UINT256_MAX = 2**256 - 1


def parse_units(amount: str, decimals: int) -> int:
    """Scale a decimal string like ``"1.5"`` to atomic units without floats.

    Raises ``ValueError`` for malformed amounts, more fractional digits than the
    token supports, negative values, or results beyond uint256.
    """
    if not isinstance(decimals, int) or isinstance(decimals, bool) or not 0 <= decimals <= 77:
        raise ValueError(f"Invalid token decimals: {decimals}")
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {amount}") from exc
    if not value.is_finite() or value < 0:
        raise ValueError(f"Invalid amount: {amount}")
    with localcontext() as ctx:
        # enough digits that normalize and scaleb never round
        ctx.prec = len(value.as_tuple().digits) + decimals + 1
        exponent = value.normalize().as_tuple().exponent
        if exponent < 0 and -exponent > decimals:
            raise ValueError(f"Amount {amount} has more than {decimals} decimal places")
        if value and value.adjusted() + decimals > 77:
            raise ValueError(f"Amount {amount} exceeds uint256")
        atomic = int(value.scaleb(decimals))
    if atomic > UINT256_MAX:
        raise ValueError(f"Amount {amount} exceeds uint256")
    return atomic


def to_uint256(amount: str) -> int:
    """Convert an atomic-unit integer string to an int suitable for uint256."""
    text = str(amount).strip()
    if not text.isdigit():
        raise ValueError(f"Invalid atomic amount: {amount}")
    value = int(text)
    if value > UINT256_MAX:
        raise ValueError(f"Amount {amount} exceeds uint256")
    return value
