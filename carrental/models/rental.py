from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from carrental.utils.constants import RentalStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Rental:
    """
    One rental of one vehicle by one customer. Vehicle and customer are kept
    by ID only. ``total`` is fixed when the rental is created and is never
    recomputed, even if the vehicle's price changes later.
    """
    vehicle_id: str
    customer_id: str
    days: int
    total: Decimal
    created_at: datetime = field(default_factory=_utcnow)
    rental_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: str = RentalStatus.RENTED
    returned_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.status == RentalStatus.RENTED

    def close(self, when: Optional[datetime] = None) -> None:
        self.status = RentalStatus.RETURNED
        self.returned_at = when or _utcnow()

    def to_dict(self) -> dict:
        return {
            "rental_id": self.rental_id,
            "vehicle_id": self.vehicle_id,
            "customer_id": self.customer_id,
            "days": self.days,
            "total": str(self.total),
            "created_at": self.created_at.isoformat(),
            "status": self.status,
            "returned_at": self.returned_at.isoformat() if self.returned_at else None,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Rental":
        returned_at = d.get("returned_at")
        return cls(
            vehicle_id=d["vehicle_id"],
            customer_id=d["customer_id"],
            days=int(d["days"]),
            total=Decimal(d["total"]),
            created_at=datetime.fromisoformat(d["created_at"]),
            rental_id=d.get("rental_id") or str(uuid.uuid4()),
            status=d.get("status") or RentalStatus.RENTED,
            returned_at=datetime.fromisoformat(returned_at) if returned_at else None,
        )
