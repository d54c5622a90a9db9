"""Rental-related service layer: rent, return and account closing."""

from __future__ import annotations

import logging
from typing import Optional

from carrental.exceptions import InvalidArgumentError, RentalNotFoundError
from carrental.models.rental import Rental
from carrental.models.user import Customer
from carrental.services.accounts import AccountDirectory
from carrental.services.catalog import VehicleCatalog
from carrental.services.ledger import RentalLedger
from carrental.services.pricing import price
from carrental.utils.constants import MAX_RENTAL_DAYS

logger = logging.getLogger(__name__)


class RentalService:
    """
    Rent and return operations.
    Uses per-kind pricing (services.pricing.price) and records every rental
    in the customer's history through RentalLedger.
    """

    @staticmethod
    def rent(
            catalog: VehicleCatalog,
            customer: Customer,
            vehicle_id: str,
            days: int,
            max_days: int = MAX_RENTAL_DAYS,
    ) -> Rental:
        """
        Rent ``vehicle_id`` to ``customer`` for ``days`` days.

        Raises:
            VehicleNotFoundError: unknown vehicle.
            InvalidArgumentError: days outside 1..max_days.
            InvalidStateError: the vehicle is already rented.
        """
        vehicle = catalog.find(vehicle_id)
        if isinstance(days, int) and not isinstance(days, bool) and days > max_days:
            raise InvalidArgumentError(f"Error: rentals are limited to {max_days} days")

        # total is fixed here and never recomputed
        total = price(vehicle, days)
        catalog.mark_rented(vehicle.vehicle_id)

        rental = Rental(
            vehicle_id=vehicle.vehicle_id,
            customer_id=customer.customer_id,
            days=days,
            total=total,
        )
        RentalLedger.append(customer, rental)
        logger.info(
            "Processed rental %s: %s rented by %s for %d days, total %s",
            rental.rental_id, vehicle.vehicle_id, customer.customer_id, days, total,
        )
        return rental

    @staticmethod
    def return_vehicle(
            catalog: VehicleCatalog,
            customer: Customer,
            vehicle_id: Optional[str] = None,
    ) -> Optional[Rental]:
        """
        Close an open rental and free the vehicle.
        - empty history -> no-op, returns None
        - vehicle_id given -> closes the customer's last open rental of that vehicle
        - vehicle_id None -> closes the last open rental in the history
        """
        if not customer.history:
            return None

        rental = RentalLedger.latest_open(customer, vehicle_id)
        if rental is None:
            if vehicle_id is None:
                raise RentalNotFoundError("Error: no open rentals to return")
            raise RentalNotFoundError(f"Error: no open rental for vehicle '{vehicle_id}'")

        catalog.mark_returned(rental.vehicle_id)
        rental.close()
        logger.info("Closed rental %s: %s returned by %s",
                    rental.rental_id, rental.vehicle_id, customer.customer_id)
        return rental

    @staticmethod
    def open_rentals(customer: Customer) -> list[Rental]:
        return [r for r in customer.history if r.is_open]

    @staticmethod
    def delete_account(catalog: VehicleCatalog, directory: AccountDirectory, customer: Customer) -> int:
        """
        Return every vehicle the customer still holds, then delete the account.
        Returns how many vehicles were released.
        """
        released = 0
        for r in RentalService.open_rentals(customer):
            if r.vehicle_id in catalog and not catalog.find(r.vehicle_id).available:
                catalog.mark_returned(r.vehicle_id)
                released += 1
            r.close()
        directory.delete(customer.customer_id)
        return released
