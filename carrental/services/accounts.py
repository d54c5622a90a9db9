from __future__ import annotations

import logging

from carrental.exceptions import (
    AuthenticationFailedError,
    CustomerNotFoundError,
    DuplicateIdError,
    InvalidArgumentError,
)
from carrental.models.user import Customer
from carrental.services.common import require_text
from carrental.utils.security import check_hash, generate_hash

logger = logging.getLogger(__name__)


class AccountDirectory:
    """Customer accounts keyed by ID: register, authenticate, delete."""

    def __init__(self):
        self._customers: dict[str, Customer] = {}

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, customer_id) -> bool:
        return customer_id in self._customers

    def register(self, customer_id: str, name: str, password: str) -> Customer:
        """Create a new customer; raise DuplicateIdError if the ID is taken."""
        cid = require_text(customer_id, "user ID")
        nm = require_text(name, "name")
        if not password:
            raise InvalidArgumentError("Error: password is required")
        if cid in self._customers:
            raise DuplicateIdError(f"Error: user ID '{cid}' already exists")
        customer = Customer(customer_id=cid, name=nm, password_hash=generate_hash(password))
        self._customers[cid] = customer
        logger.info("Registered customer %s", cid)
        return customer

    def authenticate(self, customer_id: str, password: str) -> Customer:
        """
        Return the customer when the password matches the stored hash.
        Unknown IDs and wrong passwords fail the same way.
        """
        customer = self._customers.get((customer_id or "").strip())
        if customer is None or not check_hash(password or "", customer.password_hash):
            logger.info("Failed login for %s", customer_id)
            raise AuthenticationFailedError("Error: invalid credentials")
        return customer

    def find(self, customer_id: str) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(f"Error: user '{customer_id}' not found")
        return customer

    def delete(self, customer_id: str) -> None:
        """Remove the account and its rental history."""
        if customer_id not in self._customers:
            raise CustomerNotFoundError(f"Error: user '{customer_id}' not found")
        del self._customers[customer_id]
        logger.info("Deleted customer %s", customer_id)

    def list(self) -> list[Customer]:
        return list(self._customers.values())

    def clear(self) -> None:
        self._customers.clear()

    # ---------- Snapshot ----------
    def to_snapshot(self) -> list[dict]:
        return [c.to_dict() for c in self._customers.values()]

    @classmethod
    def from_snapshot(cls, records: list[dict]) -> "AccountDirectory":
        directory = cls()
        for d in records or []:
            if not isinstance(d, dict):
                raise InvalidArgumentError(f"Error: malformed customer record {d!r}")
            customer = Customer.from_dict(d)
            if customer.customer_id in directory._customers:
                raise DuplicateIdError(f"Error: user ID '{customer.customer_id}' already exists")
            directory._customers[customer.customer_id] = customer
        return directory
