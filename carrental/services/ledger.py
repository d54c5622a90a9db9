from __future__ import annotations

from typing import Optional

from carrental.models.rental import Rental
from carrental.models.user import Customer


class RentalLedger:
    """Per-customer rental history: append, sort, and latest lookups."""

    @staticmethod
    def append(customer: Customer, rental: Rental) -> None:
        customer.history.append(rental)

    @staticmethod
    def sort_by_date(customer: Customer) -> None:
        # list.sort is stable, so equal timestamps keep their order
        customer.history.sort(key=lambda r: r.created_at)

    @staticmethod
    def latest(customer: Customer) -> Optional[Rental]:
        """Last rental in the current ordering, or None for an empty history."""
        return customer.history[-1] if customer.history else None

    @staticmethod
    def latest_open(customer: Customer, vehicle_id: Optional[str] = None) -> Optional[Rental]:
        """Last open rental in the current ordering, optionally for one vehicle."""
        for r in reversed(customer.history):
            if not r.is_open:
                continue
            if vehicle_id is not None and r.vehicle_id != vehicle_id:
                continue
            return r
        return None

    @staticmethod
    def history(customer: Customer) -> list[Rental]:
        return list(customer.history)
