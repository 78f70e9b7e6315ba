"""Contract-related domain exceptions."""

from .base import DomainException


class ContractNotFoundException(DomainException):
    """Raised when a contract cannot be found."""

    def __init__(self, contract_id: str):
        super().__init__(
            message=f"Contract not found: {contract_id}",
            code="CONTRACT_NOT_FOUND",
        )
        self.contract_id = contract_id
