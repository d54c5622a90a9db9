from __future__ import annotations

import logging
from decimal import Decimal

from carrental.exceptions import (
    DuplicateIdError,
    InvalidArgumentError,
    InvalidStateError,
    VehicleNotFoundError,
)
from carrental.models.vehicle import VEHICLE_TYPES, Bike, Car, Truck, VehicleBase
from carrental.services.common import require_positive, require_text

logger = logging.getLogger(__name__)


def default_fleet() -> list[VehicleBase]:
    """Vehicles a fresh catalog starts with."""
    return [
        Car("C1", "Honda", "Civic", Decimal("2000"), seats=5),
        Truck("T1", "Volvo", "VNL", Decimal("5000"), load_capacity=Decimal("10")),
        Bike("B1", "Royal Enfield", "Classic 350", Decimal("800")),
    ]


def vehicle_from_dict(d: dict) -> VehicleBase:
    """Map a snapshot vehicle dict to a rich vehicle object."""
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"Error: malformed vehicle record {d!r}")
    kind = (d.get("kind") or "").strip().lower()
    cls = VEHICLE_TYPES.get(kind)
    if cls is None:
        raise InvalidArgumentError(f"Error: unknown vehicle kind '{kind}'")
    base = dict(
        vehicle_id=require_text(d.get("vehicle_id"), "vehicle ID"),
        make=d.get("make", ""),
        model=d.get("model", ""),
        base_price=require_positive(d.get("base_price"), "base price"),
        available=bool(d.get("available", True)),
    )
    if cls is Car:
        return Car(**base, seats=int(d.get("seats") or 0))
    if cls is Truck:
        return Truck(**base, load_capacity=Decimal(str(d.get("load_capacity") or "0")))
    return cls(**base)


class VehicleCatalog:
    """Vehicles keyed by ID, in insertion order, with availability toggles."""

    def __init__(self):
        self._vehicles: dict[str, VehicleBase] = {}

    def __len__(self) -> int:
        return len(self._vehicles)

    def __contains__(self, vehicle_id) -> bool:
        return vehicle_id in self._vehicles

    def seed(self) -> int:
        """Add the default fleet; vehicles already present are kept. Returns how many were added."""
        added = 0
        for v in default_fleet():
            if v.vehicle_id not in self._vehicles:
                self._vehicles[v.vehicle_id] = v
                added += 1
        logger.info("Seeded catalog with %d vehicle(s)", added)
        return added

    def add(self, vehicle: VehicleBase) -> VehicleBase:
        if vehicle.vehicle_id in self._vehicles:
            raise DuplicateIdError(f"Error: vehicle '{vehicle.vehicle_id}' already exists")
        vehicle.base_price = require_positive(vehicle.base_price, "base price")
        self._vehicles[vehicle.vehicle_id] = vehicle
        return vehicle

    def find(self, vehicle_id: str) -> VehicleBase:
        """Return a vehicle by exact ID or raise VehicleNotFoundError."""
        v = self._vehicles.get(vehicle_id)
        if v is None:
            raise VehicleNotFoundError(f"Error: vehicle with ID '{vehicle_id}' not found")
        return v

    def list(self) -> list[VehicleBase]:
        return list(self._vehicles.values())

    def available(self) -> list[VehicleBase]:
        return [v for v in self._vehicles.values() if v.available]

    def mark_rented(self, vehicle_id: str) -> VehicleBase:
        v = self.find(vehicle_id)
        if not v.available:
            raise InvalidStateError(f"Error: vehicle '{vehicle_id}' is already rented")
        v.available = False
        return v

    def mark_returned(self, vehicle_id: str) -> VehicleBase:
        v = self.find(vehicle_id)
        if v.available:
            raise InvalidStateError(f"Error: vehicle '{vehicle_id}' is not rented")
        v.available = True
        return v

    def clear(self) -> None:
        self._vehicles.clear()

    # ---------- Snapshot ----------
    def to_snapshot(self) -> list[dict]:
        return [v.to_dict() for v in self._vehicles.values()]

    @classmethod
    def from_snapshot(cls, records: list[dict]) -> "VehicleCatalog":
        catalog = cls()
        for d in records or []:
            catalog.add(vehicle_from_dict(d))
        return catalog
