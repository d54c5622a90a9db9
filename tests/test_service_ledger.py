from datetime import datetime, timedelta, timezone
from decimal import Decimal

from carrental.models.rental import Rental
from carrental.services.ledger import RentalLedger

T0 = datetime(2030, 1, 10, 9, 0, tzinfo=timezone.utc)


def make_rental(vid, minutes, customer_id="U1"):
    return Rental(vid, customer_id, 1, Decimal("100.00"), created_at=T0 + timedelta(minutes=minutes))


def test_append_keeps_creation_order(customer):
    a, b = make_rental("C1", 0), make_rental("T1", 5)
    RentalLedger.append(customer, a)
    RentalLedger.append(customer, b)
    assert RentalLedger.history(customer) == [a, b]
    assert RentalLedger.latest(customer) is b


def test_sort_by_date_is_stable_and_idempotent(customer):
    late, early, tie1, tie2 = (
        make_rental("C1", 30), make_rental("T1", 0), make_rental("B1", 10), make_rental("C2", 10),
    )
    for r in (late, early, tie1, tie2):
        RentalLedger.append(customer, r)

    RentalLedger.sort_by_date(customer)
    once = list(customer.history)
    assert once == [early, tie1, tie2, late]

    RentalLedger.sort_by_date(customer)
    assert customer.history == once
    assert len(customer.history) == 4


def test_latest_on_empty_history_is_none(customer):
    assert RentalLedger.latest(customer) is None
    assert RentalLedger.latest_open(customer) is None


def test_latest_open_skips_closed_and_filters_vehicle(customer):
    first, second, third = make_rental("C1", 0), make_rental("T1", 1), make_rental("C1", 2)
    for r in (first, second, third):
        RentalLedger.append(customer, r)
    third.close()
    assert RentalLedger.latest_open(customer) is second
    assert RentalLedger.latest_open(customer, "C1") is first
    assert RentalLedger.latest_open(customer, "B1") is None


def test_history_is_a_copy(customer):
    RentalLedger.append(customer, make_rental("C1", 0))
    h = RentalLedger.history(customer)
    h.clear()
    assert len(customer.history) == 1
