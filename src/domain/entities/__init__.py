"""Domain Entities - Core business objects."""

from .contract import (
    BillingCadence,
    Contract,
    ContractStatus,
    Installment,
    InstallmentStatus,
)

__all__ = [
    "BillingCadence",
    "Contract",
    "ContractStatus",
    "Installment",
    "InstallmentStatus",
]
