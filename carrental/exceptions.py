"""
Custom exception classes for the car rental console.

Every service raises one of these so the session controller can catch
``RentalAppError`` and print a friendly message instead of crashing.
"""


class RentalAppError(Exception):
    """Base class for every recoverable error raised by the services."""

    default_message = "Error: operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class NotFoundError(RentalAppError):
    """Raised when an identifier does not match any record."""

    default_message = "Error: not found"


class VehicleNotFoundError(NotFoundError):
    """Raised when a vehicle ID cannot be found in the catalog."""

    default_message = "Error: vehicle not found"


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer ID cannot be found in the directory."""

    default_message = "Error: customer not found"


class RentalNotFoundError(NotFoundError):
    """Raised when no open rental matches a return request."""

    default_message = "Error: rental not found"


class InvalidStateError(RentalAppError):
    """Raised when a vehicle is rented twice or returned while available."""

    default_message = "Error: invalid state"


class AuthenticationFailedError(RentalAppError):
    """Raised on an unknown user ID or a wrong password."""

    default_message = "Error: invalid credentials"


class DuplicateIdError(RentalAppError):
    """Raised when registering an ID that already exists."""

    default_message = "Error: ID already exists"


class InsufficientFundsError(RentalAppError):
    """Raised when a loan transfer exceeds the sender's balance."""

    default_message = "Error: insufficient loan balance"


class InvalidArgumentError(RentalAppError):
    """Raised for out-of-range days, amounts or blank fields."""

    default_message = "Error: invalid argument"


class InvalidInputError(InvalidArgumentError):
    """Raised when a console token cannot be parsed or is out of bounds."""

    default_message = "Error: invalid input"
