"""
Static currency table used to render amounts.

Read-only, process-wide; the engine's math never looks at it.
Unknown codes fall back to USD / en-US.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np

from .schema import DEFAULT_CURRENCY


@dataclass(frozen=True)
class CurrencyInfo:
    code: str
    symbol: str
    name: str
    locale: str


CURRENCIES: Mapping[str, CurrencyInfo] = MappingProxyType({
    "USD": CurrencyInfo("USD", "$", "US Dollar", "en-US"),
    "INR": CurrencyInfo("INR", "₹", "Indian Rupee", "en-IN"),
    "GBP": CurrencyInfo("GBP", "£", "British Pound", "en-GB"),
    "EUR": CurrencyInfo("EUR", "€", "Euro", "de-DE"),
    "JPY": CurrencyInfo("JPY", "¥", "Japanese Yen", "ja-JP"),
    "AUD": CurrencyInfo("AUD", "A$", "Australian Dollar", "en-AU"),
    "CAD": CurrencyInfo("CAD", "C$", "Canadian Dollar", "en-CA"),
})


def currency_info(code: Optional[str]) -> CurrencyInfo:
    """Look up a currency code (case-insensitive), falling back to USD."""
    key = str(code).strip().upper() if code else DEFAULT_CURRENCY
    return CURRENCIES.get(key, CURRENCIES[DEFAULT_CURRENCY])


def is_known_currency(code: Optional[str]) -> bool:
    return bool(code) and str(code).strip().upper() in CURRENCIES


def format_currency(amount: float, code: Optional[str] = DEFAULT_CURRENCY) -> str:
    """Whole-unit amount with symbol and thousands separators, e.g. -$1,235."""
    info = currency_info(code)
    if not np.isfinite(amount):
        return f"{info.symbol}{amount}"
    rounded = float(np.round(amount))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{info.symbol}{abs(rounded):,.0f}"


def format_compact(amount: float, code: Optional[str] = DEFAULT_CURRENCY) -> str:
    """Axis-label style: $12.5k, $1.2M."""
    info = currency_info(code)
    value = abs(float(amount))
    sign = "-" if amount < 0 else ""
    if value >= 1_000_000:
        return f"{sign}{info.symbol}{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{sign}{info.symbol}{value / 1_000:.1f}k"
    return f"{sign}{info.symbol}{value:.0f}"
