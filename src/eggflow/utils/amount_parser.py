"""Amount and quantity parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "Rs 1,234.50"
    - "PKR 500"
    - "$123.45"

    Amounts are never negative; polarity comes from the transaction type.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbols and codes
    amount_str = re.sub(r"^(PKR|Rs\.?|USD)\s*", "", amount_str, flags=re.IGNORECASE)
    amount_str = re.sub(r"[$€£¥₨]", "", amount_str)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {amount_str}")
    return amount


def parse_item(item_str: str) -> tuple[str, Decimal, Decimal]:
    """Parse an invoice line item of the form ``description:quantity:unit_price``.

    The description may be omitted (``quantity:unit_price``), in which case
    it defaults to "Eggs".

    Raises:
        ValueError: If the item cannot be parsed
    """
    parts = [part.strip() for part in item_str.rsplit(":", 2)]
    if len(parts) == 2:
        description = "Eggs"
        quantity_str, price_str = parts
    elif len(parts) == 3:
        description, quantity_str, price_str = parts
        description = description or "Eggs"
    else:
        raise ValueError(
            f"Could not parse item '{item_str}', expected DESCRIPTION:QUANTITY:UNIT_PRICE"
        )
    return description, parse_amount(quantity_str), parse_amount(price_str)
