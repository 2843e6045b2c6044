"""pt-BR number formatting used at the form boundary"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from supera_advisor.domain.exceptions import ValidationError

CENTS = Decimal("0.01")

# Field length of the form: up to 999.999.999.999.999,99
MAX_MASK_DIGITS = 17

_NON_DIGITS = re.compile(r"[^0-9]")
_LOCALE_DECIMAL = re.compile(r"^-?\d+(\.\d{3})*(,\d+)?$")


def quantize_cents(amount: Decimal) -> Decimal:
    """
    Round half-up to cents.

    The default context keeps 28 significant digits, so quantizing an amount
    with more integer digits than that fails. Precision is raised locally to
    fit the amount.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_brl(amount: Decimal | int | float) -> str:
    """
    Render an amount with two fixed decimals, "." for thousands and "," for decimals.

    Example:
        Decimal("1234.5") -> "1.234,50"
    """
    value = quantize_cents(Decimal(str(amount)))
    # Format in en-US grouping first, then swap separators
    text = f"{value:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def mask_currency_input(raw: str) -> str:
    """
    Input mask applied to a form field on every keystroke.

    Every non-digit is dropped and the remaining digits are read as cents,
    so typing "1", "12", "123" shows "0,01", "0,12", "1,23".
    Digits past MAX_MASK_DIGITS are ignored, like a full text field.
    Returns "" when nothing numeric was typed.
    """
    if not raw:
        return ""
    digits = _NON_DIGITS.sub("", raw)[:MAX_MASK_DIGITS]
    if not digits:
        return ""
    return format_brl(Decimal(digits).scaleb(-2))


def parse_locale_decimal(text: str, field: str | None = None) -> Decimal:
    """
    Parse pt-BR formatted text ("1.234,56") into a Decimal.

    Raises:
        ValidationError: text is empty or not a pt-BR number
    """
    if text is None:
        raise ValidationError("Value is required", field=field)
    cleaned = text.strip()
    if not cleaned or not _LOCALE_DECIMAL.match(cleaned):
        raise ValidationError(f"Not a valid amount: {text!r}", field=field)

    try:
        return Decimal(cleaned.replace(".", "").replace(",", "."))
    except InvalidOperation as e:
        raise ValidationError(f"Not a valid amount: {text!r}", field=field) from e
