"""Repository implementations."""

from .contract_repository import PostgresContractRepository

__all__ = [
    "PostgresContractRepository",
]
