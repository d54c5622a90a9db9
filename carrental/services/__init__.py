from .accounts import AccountDirectory
from .catalog import VehicleCatalog
from .ledger import RentalLedger
from .loans import LoanService
from .pricing import price
from .rental_service import RentalService

__all__ = [
    "AccountDirectory",
    "VehicleCatalog",
    "RentalLedger",
    "LoanService",
    "RentalService",
    "price",
]
