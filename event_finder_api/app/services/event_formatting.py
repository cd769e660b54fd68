"""
Display formatting for event dates, times and prices.

All functions are pure.  Date and time helpers expect the upstream
machine format and raise ``MalformedInputError`` for anything else;
callers decide whether that fails the request.

Weekday and month names come from fixed US English tables so the
output does not depend on the process locale.
"""

import re
from datetime import date
from numbers import Real
from typing import Optional

from ..core.errors import MalformedInputError


WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "NZD": "$",
    "MXN": "$",
    "EUR": "€",
    "GBP": "£",
}
DEFAULT_CURRENCY_SYMBOL = "$"

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
# Upstream local times usually carry seconds; they are not displayed.
_TIME_RE = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2}))?$")


def parse_date(date_string: str) -> date:
    """Parse ``YYYY-MM-DD`` into a calendar date."""
    match = _DATE_RE.match(date_string) if isinstance(date_string, str) else None
    if not match:
        raise MalformedInputError(date_string, "a YYYY-MM-DD date")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise MalformedInputError(date_string, "a valid calendar date") from exc


def parse_time(time_string: str) -> tuple[int, int, int]:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into ``(hours, minutes, seconds)``."""
    match = _TIME_RE.match(time_string) if isinstance(time_string, str) else None
    if not match:
        raise MalformedInputError(time_string, "an HH:MM time")
    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise MalformedInputError(time_string, "a 24-hour time")
    return hours, minutes, seconds


def format_date(date_string: str) -> str:
    """Convert ``YYYY-MM-DD`` to ``"Thu, Jul 4"``."""
    value = parse_date(date_string)
    return f"{WEEKDAY_ABBR[value.weekday()]}, {MONTH_ABBR[value.month - 1]} {value.day}"


def format_time(time_string: str) -> str:
    """Convert a 24-hour time to ``"1:05 PM"``.

    Hours 0 and 12 both display as 12; 12 and later are PM.
    """
    hours, minutes, _ = parse_time(time_string)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def plain_number(amount: Real) -> str:
    """Render a number without a trailing ``.0`` for whole floats."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def format_list_price(amount: Real, currency: Optional[str]) -> str:
    """List-view price: ``"25 USD"``, or just the number without a currency."""
    if currency:
        return f"{plain_number(amount)} {currency}"
    return plain_number(amount)


def format_detail_price(amount: Optional[Real], currency: Optional[str] = None) -> Optional[str]:
    """Detail-view price: ``"$25.00"``.  ``None`` stays ``None``; zero does not."""
    if amount is None:
        return None
    symbol = CURRENCY_SYMBOLS.get((currency or "").upper(), DEFAULT_CURRENCY_SYMBOL)
    return f"{symbol}{amount:.2f}"
