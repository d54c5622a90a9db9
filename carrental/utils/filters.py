"""Text formatting helpers for the console: money, timestamps, vehicles, rentals."""
from datetime import datetime, timezone
from decimal import Decimal

import pytz

from carrental.utils.constants import VehicleKind

DEFAULT_TZ = "Asia/Kolkata"
DEFAULT_CURRENCY = "₹"


def fmt_money(amount, symbol: str = DEFAULT_CURRENCY) -> str:
    return f"{symbol}{Decimal(amount):,.2f}"


def fmt_iso_local(value, tz_name: str = DEFAULT_TZ) -> str:
    """
    Format a datetime (or ISO string) in the display timezone.
    Supports:
      - datetime objects, naive or aware
      - 'YYYY-MM-DDTHH:MM:SS' with or without an offset or trailing 'Z'
    On parse error, returns the original value.
    """
    if value is None:
        return ""

    if isinstance(value, datetime):
        dt = value
    else:
        s = str(value).strip()
        if not s:
            return ""
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError:
            return str(value)

    # If naive datetime, assume UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    local = dt.astimezone(tz)
    return local.strftime("%d/%m/%Y %H:%M")


def fmt_vehicle(v, symbol: str = DEFAULT_CURRENCY) -> str:
    """One catalog line, e.g. '[C1] Honda Civic - ₹2,000.00/day (Available) - 5 seats'."""
    line = f"[{v.vehicle_id}] {v.label} - {fmt_money(v.base_price, symbol)}/day " \
           f"({'Available' if v.available else 'Rented'})"
    if v.kind == VehicleKind.CAR:
        line += f" - {v.seats} seats"
    elif v.kind == VehicleKind.TRUCK:
        line += f" - {Decimal(v.load_capacity):.1f} ton capacity"
    return line


def fmt_rental(r, renter_name: str = "", symbol: str = DEFAULT_CURRENCY, tz_name: str = DEFAULT_TZ) -> str:
    """One history line for a rental."""
    who = renter_name or r.customer_id
    line = f"{r.vehicle_id} rented by {who} for {r.days} days: " \
           f"{fmt_money(r.total, symbol)} on {fmt_iso_local(r.created_at, tz_name)}"
    if not r.is_open:
        line += f" (returned {fmt_iso_local(r.returned_at, tz_name)})"
    return line
