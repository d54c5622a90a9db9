from __future__ import annotations

import logging
from decimal import Decimal

from carrental.exceptions import InsufficientFundsError, InvalidArgumentError
from carrental.models.user import Customer
from carrental.services.common import require_positive

logger = logging.getLogger(__name__)


class LoanService:
    """
    Loan balance operations on customers.
    Loans are granted without any credit check; transfers move balance
    from one customer to another and never change the total.
    """

    @staticmethod
    def request_loan(customer: Customer, amount) -> Decimal:
        """Add ``amount`` to the customer's balance and return the new balance."""
        money = require_positive(amount, "loan amount")
        customer.loan_balance += money
        logger.info("Loan of %s granted to %s", money, customer.customer_id)
        return customer.loan_balance

    @staticmethod
    def transfer(source: Customer, target: Customer, amount) -> None:
        """
        Move ``amount`` from ``source`` to ``target``.
        Raises InsufficientFundsError (balances untouched) if the source
        balance is too small.
        """
        money = require_positive(amount, "transfer amount")
        if source.customer_id == target.customer_id:
            raise InvalidArgumentError("Error: cannot transfer to the same account")
        if money > source.loan_balance:
            raise InsufficientFundsError(
                f"Error: insufficient loan to transfer (balance {source.loan_balance})"
            )
        source.loan_balance -= money
        target.loan_balance += money
        logger.info("Transferred %s from %s to %s", money, source.customer_id, target.customer_id)
