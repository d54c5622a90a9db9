from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from carrental.utils.constants import VehicleKind


@dataclass
class VehicleBase:
    """
    Base vehicle record. ``base_price`` is the listed price per day before
    any kind-specific adjustment; pricing lives in ``services.pricing``.
    """
    vehicle_id: str
    make: str
    model: str
    base_price: Decimal
    available: bool = field(default=True, kw_only=True)

    kind: ClassVar[str] = ""

    @property
    def label(self) -> str:
        return f"{self.make} {self.model}".strip()

    def to_dict(self) -> dict:
        return {
            "vehicle_id": self.vehicle_id,
            "kind": self.kind,
            "make": self.make,
            "model": self.model,
            "base_price": str(self.base_price),
            "available": self.available,
        }


@dataclass
class Car(VehicleBase):
    """
    Cars seating more than four get a small per-day discount.
    """
    seats: int = 4

    kind: ClassVar[str] = VehicleKind.CAR

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["seats"] = self.seats
        return d


@dataclass
class Truck(VehicleBase):
    """
    Trucks carry a surcharge of one percent per tonne of load capacity.
    """
    load_capacity: Decimal = Decimal("0")

    kind: ClassVar[str] = VehicleKind.TRUCK

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["load_capacity"] = str(self.load_capacity)
        return d


@dataclass
class Bike(VehicleBase):
    """
    Bikes follow the base rule.
    """
    kind: ClassVar[str] = VehicleKind.BIKE


VEHICLE_TYPES = {
    VehicleKind.CAR: Car,
    VehicleKind.TRUCK: Truck,
    VehicleKind.BIKE: Bike,
}
