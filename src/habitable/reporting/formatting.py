# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Display formatting for currency amounts and large counts."""

from __future__ import annotations

from ..core.calculations import round_half_up

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "CNY": "CN¥",
    "BRL": "R$",
    "MXN": "MX$",
    "CAD": "CA$",
    "AUD": "A$",
    "KRW": "₩",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
}


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Whole-unit currency string with thousands separators.

    Example:
        >>> format_currency(1234567.5)
        '$1,234,568'
        >>> format_currency(-2500, "KES")
        '-KES 2,500'
    """
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    whole = int(round_half_up(abs(amount)))
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}{symbol}{whole:,}"


def format_number(value: float) -> str:
    """Abbreviate millions and thousands to one decimal: 1.2M, 3.4K, 999."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:.0f}"
