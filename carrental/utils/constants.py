# carrental/utils/constants.py

"""
Global constants for vehicle kinds, statuses and limits.
These constants are imported by both models and services.
"""

from decimal import Decimal


class VehicleKind:
    CAR = "car"
    TRUCK = "truck"
    BIKE = "bike"


class RentalStatus:
    RENTED = "rented"
    RETURNED = "returned"


class SessionState:
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


# --- Limits ---
MAX_RENTAL_DAYS = 365
MIN_AMOUNT = Decimal("0.01")
MAX_LOAN_AMOUNT = Decimal("1000000")

# --- Money ---
CENTS = Decimal("0.01")
SEAT_DISCOUNT = Decimal("0.05")
SEAT_DISCOUNT_THRESHOLD = 4

# --- Snapshot ---
SNAPSHOT_VERSION = 1
