"""
Interactive console session.

The controller reads whitespace-delimited tokens, calls exactly one service
operation per menu choice and echoes a line of result. Service errors are
reported and the loop continues; end of input behaves like Exit.
"""

from __future__ import annotations

import logging
from collections import deque
from decimal import Decimal
from typing import Callable, Optional, TextIO

import click

from carrental.exceptions import InvalidInputError, InvalidStateError, RentalAppError
from carrental.models.store import Store
from carrental.models.user import Customer
from carrental.services.common import parse_bounded_amount, parse_bounded_int
from carrental.services.ledger import RentalLedger
from carrental.services.loans import LoanService
from carrental.services.rental_service import RentalService
from carrental.utils.constants import MAX_LOAN_AMOUNT, MAX_RENTAL_DAYS, MIN_AMOUNT, SessionState
from carrental.utils.decorators import login_required
from carrental.utils.filters import (
    DEFAULT_CURRENCY,
    DEFAULT_TZ,
    fmt_money,
    fmt_rental,
    fmt_vehicle,
)

logger = logging.getLogger(__name__)

MAIN_MENU = ("Login", "Register", "Exit")
USER_MENU = (
    "Rent Vehicle",
    "Return Vehicle",
    "Request Loan",
    "Transfer Loan",
    "Show History",
    "Sort History",
    "Delete Account",
    "Logout",
)


class TokenReader:
    """Blocking source of whitespace-delimited tokens from a text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pending: deque[str] = deque()

    def next(self) -> str:
        """Return the next token; raise EOFError when the stream is exhausted."""
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()


class SessionController:
    """LOGGED_OUT -> LOGGED_IN -> LOGGED_OUT console state machine."""

    def __init__(
            self,
            store: Store,
            reader: TokenReader,
            echo: Optional[Callable[..., None]] = None,
            *,
            max_days: int = MAX_RENTAL_DAYS,
            max_loan: Decimal = MAX_LOAN_AMOUNT,
            currency: str = DEFAULT_CURRENCY,
            tz_name: str = DEFAULT_TZ,
            save_on_exit: bool = True,
    ):
        self.store = store
        self.reader = reader
        self.echo = echo or click.echo
        self.max_days = max_days
        self.max_loan = Decimal(str(max_loan))
        self.currency = currency
        self.tz_name = tz_name
        self.save_on_exit = save_on_exit
        self.state = SessionState.LOGGED_OUT
        self.customer: Optional[Customer] = None

    @classmethod
    def from_config(cls, config, store: Store, reader: TokenReader, echo=None) -> "SessionController":
        """Build a controller from a Flask config mapping."""
        return cls(
            store,
            reader,
            echo,
            max_days=int(config.get("MAX_RENTAL_DAYS", MAX_RENTAL_DAYS)),
            max_loan=Decimal(str(config.get("MAX_LOAN_AMOUNT", MAX_LOAN_AMOUNT))),
            currency=config.get("CURRENCY_SYMBOL", DEFAULT_CURRENCY),
            tz_name=config.get("DISPLAY_TZ", DEFAULT_TZ),
            save_on_exit=bool(config.get("SAVE_ON_EXIT", True)),
        )

    @property
    def catalog(self):
        return self.store.catalog

    @property
    def directory(self):
        return self.store.directory

    # ---------- input helpers ----------
    def _ask(self, label: str) -> str:
        self.echo(label, nl=False)
        return self.reader.next()

    def _read_int(self, lo: int, hi: int) -> int:
        while True:
            try:
                return parse_bounded_int(self.reader.next(), lo, hi)
            except InvalidInputError:
                self.echo("Invalid, retry: ", nl=False)

    def _read_amount(self, lo, hi) -> Decimal:
        while True:
            try:
                return parse_bounded_amount(self.reader.next(), lo, hi)
            except InvalidInputError:
                self.echo("Invalid, retry: ", nl=False)

    def _menu(self, title: str, items) -> None:
        self.echo(f"\n===== {title} =====")
        for i, item in enumerate(items, start=1):
            self.echo(f"{i}) {item}")

    # ---------- main loop ----------
    def run(self) -> int:
        """Run until Exit (or end of input). Returns a process exit code."""
        while True:
            try:
                if self.state == SessionState.LOGGED_OUT:
                    if not self._main_step():
                        return 0
                else:
                    self._user_step()
            except EOFError:
                self.echo("")
                self.exit_app()
                return 0

    def _main_step(self) -> bool:
        self._menu("CAR RENTAL SYSTEM", MAIN_MENU)
        choice = self._read_int(1, len(MAIN_MENU))
        if choice == 3:
            self.exit_app()
            return False
        action = self.login if choice == 1 else self.register
        self._dispatch(action)
        return True

    def _user_step(self) -> None:
        self._menu(f"USER MENU: {self.customer.name}", USER_MENU)
        actions = {
            1: self.rent,
            2: self.return_vehicle,
            3: self.request_loan,
            4: self.transfer_loan,
            5: self.show_history,
            6: self.sort_history,
            7: self.delete_account,
            8: self.logout,
        }
        choice = self._read_int(1, len(USER_MENU))
        self._dispatch(actions[choice])

    def _dispatch(self, action) -> None:
        try:
            action()
        except RentalAppError as e:
            logger.debug("Action %s failed: %s", action.__name__, e.message)
            self.echo(f"⚠ {e.message}")

    # ---------- logged-out actions ----------
    def login(self) -> Customer:
        uid = self._ask("UserID: ")
        pw = self._ask("Password: ")
        customer = self.directory.authenticate(uid, pw)
        self.customer = customer
        self.state = SessionState.LOGGED_IN
        self.echo(f"Welcome, {customer.name}.")
        return customer

    def register(self) -> Customer:
        uid = self._ask("ID: ")
        name = self._ask("Name: ")
        pw = self._ask("Password: ")
        customer = self.directory.register(uid, name, pw)
        self.echo("Registered.")
        return customer

    def exit_app(self) -> None:
        if self.save_on_exit:
            try:
                self.store.save()
            except (OSError, TypeError, ValueError) as e:
                logger.error("Saving snapshot failed: %s", e)
        self.echo("Exiting.")

    # ---------- logged-in actions ----------
    def _list_vehicles(self) -> None:
        for v in self.catalog.list():
            self.echo(fmt_vehicle(v, self.currency))

    @login_required
    def rent(self):
        self._list_vehicles()
        vid = self._ask("VehicleID: ")
        vehicle = self.catalog.find(vid)
        if not vehicle.available:
            raise InvalidStateError("Error: vehicle unavailable")
        self.echo("Days: ", nl=False)
        days = self._read_int(1, self.max_days)
        rental = RentalService.rent(self.catalog, self.customer, vid, days, max_days=self.max_days)
        self.echo(f"Rented. {self._fmt(rental)}")
        return rental

    @login_required
    def return_vehicle(self):
        if not self.customer.history:
            self.echo("No rentals")
            return None
        open_rentals = RentalService.open_rentals(self.customer)
        if not open_rentals:
            self.echo("No open rentals")
            return None
        for r in open_rentals:
            self.echo(self._fmt(r))
        vid = self._ask("VehicleID: ")
        rental = RentalService.return_vehicle(self.catalog, self.customer, vid)
        self.echo(f"Returned {rental.vehicle_id}.")
        return rental

    @login_required
    def request_loan(self):
        self.echo("Amount: ", nl=False)
        amount = self._read_amount(MIN_AMOUNT, self.max_loan)
        balance = LoanService.request_loan(self.customer, amount)
        self.echo(f"Loan new balance: {fmt_money(balance, self.currency)}")
        return balance

    @login_required
    def transfer_loan(self):
        target = self.directory.find(self._ask("TargetID: "))
        self.echo("Amt: ", nl=False)
        amount = self._read_amount(MIN_AMOUNT, self.max_loan)
        LoanService.transfer(self.customer, target, amount)
        self.echo(f"Done. Balance: {fmt_money(self.customer.loan_balance, self.currency)}")

    @login_required
    def show_history(self):
        history = RentalLedger.history(self.customer)
        if not history:
            self.echo("No rentals")
        for r in history:
            self.echo(self._fmt(r))
        return history

    @login_required
    def sort_history(self):
        RentalLedger.sort_by_date(self.customer)
        self.echo("Sorted.")

    @login_required
    def delete_account(self):
        RentalService.delete_account(self.catalog, self.directory, self.customer)
        self._end_session()
        self.echo("Deleted account.")

    @login_required
    def logout(self):
        self._end_session()
        self.echo("Logged out.")

    def _end_session(self) -> None:
        self.customer = None
        self.state = SessionState.LOGGED_OUT

    def _fmt(self, rental) -> str:
        return fmt_rental(rental, self.customer.name, self.currency, self.tz_name)
