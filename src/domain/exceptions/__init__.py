"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .billing import CadenceMismatchException, InvalidBillingRequestException
from .contract import ContractNotFoundException
from .storage import DataAccessException

__all__ = [
    "DomainException",
    "CadenceMismatchException",
    "InvalidBillingRequestException",
    "ContractNotFoundException",
    "DataAccessException",
]
