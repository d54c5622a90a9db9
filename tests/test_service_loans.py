from decimal import Decimal

import pytest

from carrental.exceptions import InsufficientFundsError, InvalidArgumentError
from carrental.services.loans import LoanService


@pytest.fixture
def pair(directory):
    return directory.register("U1", "Alice", "pw1"), directory.register("U2", "Bob", "pw2")


def test_loan_then_transfer_scenario(pair):
    u1, u2 = pair
    assert LoanService.request_loan(u1, 1000) == Decimal("1000.00")
    LoanService.transfer(u1, u2, 400)
    assert u1.loan_balance == Decimal("600")
    assert u2.loan_balance == Decimal("400")


def test_transfer_conserves_total(pair):
    u1, u2 = pair
    LoanService.request_loan(u1, Decimal("250.75"))
    LoanService.request_loan(u2, Decimal("10"))
    before = u1.loan_balance + u2.loan_balance
    LoanService.transfer(u1, u2, Decimal("100.25"))
    assert u1.loan_balance + u2.loan_balance == before


def test_insufficient_funds_leaves_balances(pair):
    u1, u2 = pair
    LoanService.request_loan(u1, 100)
    with pytest.raises(InsufficientFundsError):
        LoanService.transfer(u1, u2, Decimal("100.01"))
    assert u1.loan_balance == Decimal("100")
    assert u2.loan_balance == Decimal("0")


def test_transfer_entire_balance(pair):
    u1, u2 = pair
    LoanService.request_loan(u1, 50)
    LoanService.transfer(u1, u2, 50)
    assert u1.loan_balance == 0


@pytest.mark.parametrize("amount", [0, -5, "abc", True])
def test_loan_amount_must_be_positive(pair, amount):
    u1, _ = pair
    with pytest.raises(InvalidArgumentError):
        LoanService.request_loan(u1, amount)
    assert u1.loan_balance == 0


def test_transfer_to_self_rejected(pair):
    u1, _ = pair
    LoanService.request_loan(u1, 10)
    with pytest.raises(InvalidArgumentError):
        LoanService.transfer(u1, u1, 5)
    assert u1.loan_balance == Decimal("10")
