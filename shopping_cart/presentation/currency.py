"""Currency display formatting.

The domain emits plain numbers; this module turns them into strings for a
locale and currency. Views receive the formatter as a ``(amount) -> str``
function so it can be swapped without touching the cart.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from shopping_cart.domain.types import Amount

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"

CurrencyFormatter = Callable[[Amount], str]


@dataclass(frozen=True)
class LocaleFormat:
    """Separators and symbol placement for a locale."""

    group: str
    decimal: str
    symbol_first: bool


LOCALE_FORMATS: dict[str, LocaleFormat] = {
    "fr-FR": LocaleFormat(group=NARROW_NBSP, decimal=",", symbol_first=False),
    "de-DE": LocaleFormat(group=".", decimal=",", symbol_first=False),
    "en-US": LocaleFormat(group=",", decimal=".", symbol_first=True),
    "ja-JP": LocaleFormat(group=",", decimal=".", symbol_first=True),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "JPY": "¥",
}

# Symbols that differ for a given locale.
LOCALE_SYMBOLS: dict[tuple[str, str], str] = {
    ("ja-JP", "JPY"): "\uffe5",
}

# ISO 4217 minor units; anything not listed uses 2.
CURRENCY_DIGITS: dict[str, int] = {
    "JPY": 0,
}

DEFAULT_LOCALE = "fr-FR"
DEFAULT_CURRENCY = "EUR"


def is_valid_currency_code(currency: str) -> bool:
    """Whether the value looks like an ISO 4217 code (three letters)."""
    return isinstance(currency, str) and len(currency) == 3 and currency.isalpha()


def _group_digits(integer_part: str, separator: str) -> str:
    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    return separator.join(groups)


def currency_formatter(
    locale: str = DEFAULT_LOCALE, currency: str = DEFAULT_CURRENCY
) -> CurrencyFormatter:
    """Build a formatter for a locale and ISO currency code.

    Args:
        locale: one of LOCALE_FORMATS (e.g. "fr-FR")
        currency: ISO 4217 code (e.g. "EUR")

    Returns:
        function formatting an amount, e.g. 1200 -> "1 200,00 €" for fr-FR/EUR

    Raises:
        ValueError: unsupported locale or malformed currency code
    """
    if locale not in LOCALE_FORMATS:
        raise ValueError(f"Unsupported locale: {locale}. Supported locales are {sorted(LOCALE_FORMATS)}")
    if not is_valid_currency_code(currency):
        raise ValueError(f"Invalid currency code: {currency}")
    code = currency.upper()

    fmt = LOCALE_FORMATS[locale]
    symbol = LOCALE_SYMBOLS.get((locale, code), CURRENCY_SYMBOLS.get(code, code))
    digits = CURRENCY_DIGITS.get(code, 2)
    exponent = Decimal(1).scaleb(-digits)

    def format_amount(amount: Amount) -> str:
        value = Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        integer_part, _, fraction = f"{abs(value):.{digits}f}".partition(".")
        number = _group_digits(integer_part, fmt.group)
        if fraction:
            number = f"{number}{fmt.decimal}{fraction}"

        if not fmt.symbol_first:
            return f"{sign}{number}{NBSP}{symbol}"
        # Alphabetic codes need a gap before the digits, symbols do not.
        gap = NBSP if symbol == code else ""
        return f"{sign}{symbol}{gap}{number}"

    return format_amount
