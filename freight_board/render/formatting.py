"""
Value formatting for rendered freight views (pt-BR conventions).
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a stored number.

    Accepts ints, floats, Decimals and numeric strings using either a dot or
    a pt-BR decimal comma. Booleans and anything unparseable give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (Decimal, int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace("R$", "").strip()
        if not text:
            return None
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    return amount if amount.is_finite() else None


def format_currency(value: Any, empty: str = "Not specified") -> str:
    """
    Format a value as Brazilian reais, e.g. ``R$ 1.234,56``.

    Args:
        value: Number or numeric string
        empty: Returned for missing, zero or unparseable values

    Returns:
        Formatted currency string
    """
    amount = to_decimal(value)
    if not amount:
        return empty
    text = f"{amount.quantize(Decimal('0.01')):,.2f}"
    # 1,234.56 -> 1.234,56
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {text}"


def format_number(value: Any) -> Optional[str]:
    """Render a number without a trailing ``.0``; non-numbers pass through as text."""
    amount = to_decimal(value)
    if amount is None:
        if value is None or value == "":
            return None
        return str(value)
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")


def format_km_range(km_start: Any, km_end: Any) -> str:
    """Render a distance band, e.g. ``0 - 100 km``; missing bounds show as 0."""
    return f"{format_number(km_start) or '0'} - {format_number(km_end) or '0'} km"


def format_date(value: Any) -> Optional[str]:
    """
    Render a stored date as ``dd/mm/yyyy``.

    Accepts date/datetime objects and ISO 8601 strings (a trailing ``Z`` too).
    Anything else comes back as plain text; missing values give None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return f"{value:%d/%m/%Y}"
    text = str(value).strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    return f"{parsed:%d/%m/%Y}"
