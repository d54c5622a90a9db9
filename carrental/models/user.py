from dataclasses import dataclass, field
from decimal import Decimal

from carrental.models.rental import Rental


@dataclass
class Customer:
    """
    Registered customer. Only the password hash is kept; the history holds
    rentals in the order they were created unless the customer sorts it.
    """
    customer_id: str
    name: str
    password_hash: str
    loan_balance: Decimal = Decimal("0")
    history: list[Rental] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "name": self.name,
            "password_hash": self.password_hash,
            "loan_balance": str(self.loan_balance),
            "history": [r.to_dict() for r in self.history],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Customer":
        return cls(
            customer_id=d["customer_id"],
            name=d.get("name", ""),
            password_hash=d["password_hash"],
            loan_balance=Decimal(d.get("loan_balance") or "0"),
            history=[Rental.from_dict(r) for r in d.get("history") or []],
        )
