"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.domain.entities import Contract, Installment


class ContractRepository(ABC):
    """
    Abstract contract store consumed by the billing engine.

    Implementations may use PostgreSQL, in-memory storage, etc. Any read
    or write failure must surface as a DataAccessException.
    """

    @abstractmethod
    async def get_all_contracts(self) -> List[Contract]:
        """
        Retrieve every contract.

        Returns:
            List of contracts, ordered by contract number
        """
        ...

    @abstractmethod
    async def get_contract(self, contract_id: str) -> Optional[Contract]:
        """
        Retrieve a contract by ID.

        Args:
            contract_id: The contract's unique identifier

        Returns:
            The contract if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_installments(self, contract_id: str) -> List[Installment]:
        """
        Retrieve all installments of a contract.

        Args:
            contract_id: The contract's unique identifier

        Returns:
            List of installments in no guaranteed order
        """
        ...

    @abstractmethod
    async def update_installment_due_date(
        self,
        installment_id: str,
        due_date: date,
    ) -> None:
        """
        Persist a new due date for one installment.

        Args:
            installment_id: The installment to rewrite
            due_date: The corrected due date

        Raises:
            DataAccessException: If the write fails or the installment
                does not exist
        """
        ...

    @abstractmethod
    async def get_plan_name(self, plan_id: str) -> Optional[str]:
        """
        Look up a plan's display name.

        Args:
            plan_id: The plan's unique identifier

        Returns:
            The plan name if found, None otherwise
        """
        ...
