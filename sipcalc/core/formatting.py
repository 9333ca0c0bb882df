"""Currency display strings for projection figures."""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict


class Currency(str, Enum):
    USD = "USD"
    INR = "INR"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    AUD = "AUD"
    CAD = "CAD"
    SGD = "SGD"


SYMBOLS: Dict[Currency, str] = {
    Currency.USD: "$",
    Currency.INR: "₹",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.JPY: "¥",
    Currency.AUD: "A$",
    Currency.CAD: "CA$",
    Currency.SGD: "SGD ",
}


def _group_western(digits: str) -> str:
    return f"{int(digits):,}"


def _group_indian(digits: str) -> str:
    # last three digits, then pairs: 12,34,56,789
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float, currency: Currency | str = Currency.USD) -> str:
    """Format ``amount`` as whole currency units, e.g. ``$1,234`` or ``₹12,34,567``."""
    currency = Currency(currency)
    rounded = math.floor(abs(amount) + 0.5)
    digits = str(rounded)
    grouped = _group_indian(digits) if currency is Currency.INR else _group_western(digits)
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}{SYMBOLS[currency]}{grouped}"
