"""
Per-kind rental pricing.

Each vehicle kind has its own cost function; ``price`` looks the function up
by ``vehicle.kind`` and rounds the result to cents.
"""

from decimal import Decimal

from carrental.exceptions import InvalidArgumentError
from carrental.models.vehicle import Bike, Car, Truck, VehicleBase
from carrental.services.common import to_money
from carrental.utils.constants import SEAT_DISCOUNT, SEAT_DISCOUNT_THRESHOLD, VehicleKind


def _car_price(vehicle: Car, days: int) -> Decimal:
    # small discount for cars with more seats
    factor = 1 - (SEAT_DISCOUNT if vehicle.seats > SEAT_DISCOUNT_THRESHOLD else 0)
    return days * vehicle.base_price * factor


def _truck_price(vehicle: Truck, days: int) -> Decimal:
    factor = 1 + Decimal(vehicle.load_capacity) / 100
    return days * vehicle.base_price * factor


def _bike_price(vehicle: Bike, days: int) -> Decimal:
    return days * vehicle.base_price


PRICING = {
    VehicleKind.CAR: _car_price,
    VehicleKind.TRUCK: _truck_price,
    VehicleKind.BIKE: _bike_price,
}


def price(vehicle: VehicleBase, days: int) -> Decimal:
    """
    Total cost of renting ``vehicle`` for ``days`` days.
    ``days`` must be a positive int; raises InvalidArgumentError otherwise.
    """
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise InvalidArgumentError("Error: days must be a positive whole number")
    fn = PRICING.get(vehicle.kind)
    if fn is None:
        raise InvalidArgumentError(f"Error: no pricing for vehicle kind '{vehicle.kind}'")
    return to_money(fn(vehicle, days))
