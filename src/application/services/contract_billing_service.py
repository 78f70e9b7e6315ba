"""Contract billing service - billing use cases for stored contracts."""

from datetime import date

import structlog

from src.core.metrics import record_payment_status
from src.domain.entities import Contract
from src.domain.exceptions import ContractNotFoundException
from src.domain.interfaces import ContractRepository
from src.application.dto import PaymentStatusResponse, RegularizationResponse
from src.service.billing import (
    BillingSettings,
    billing_settings,
    evaluate_payment_status,
    get_action_required,
    quote_regularization,
)

logger = structlog.get_logger(__name__)


class ContractBillingService:
    """
    Application service for billing operations on persisted contracts.

    Loads contracts through the repository port and runs the billing
    engine on them.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        settings: BillingSettings = billing_settings,
    ):
        self._contract_repo = contract_repository
        self._settings = settings

    async def get_regularization_quote(
        self,
        contract_id: str,
        current_date: date,
    ) -> RegularizationResponse:
        """
        Quote what a contract in arrears owes on `current_date`.

        Args:
            contract_id: The contract's unique identifier
            current_date: Date the payment would be processed

        Returns:
            RegularizationResponse priced at the contract's period amount

        Raises:
            ContractNotFoundException: If contract not found
            DataAccessException: If the contract store fails
        """
        contract = await self._load_contract(contract_id)

        quote = quote_regularization(contract, current_date, settings=self._settings)

        logger.info(
            "contract_regularization_quoted",
            contract_id=contract_id,
            contract_number=contract.contract_number,
            overdue_periods=quote.overdue_periods,
            amount_cents=quote.amount_cents,
        )

        return RegularizationResponse.from_quote(quote, contract_id=contract_id)

    async def get_payment_status(
        self,
        contract_id: str,
        current_date: date,
    ) -> PaymentStatusResponse:
        """
        Evaluate the status a contract should be in on `current_date`.

        Raises:
            ContractNotFoundException: If contract not found
            DataAccessException: If the contract store fails
        """
        contract = await self._load_contract(contract_id)

        result = evaluate_payment_status(contract, current_date, self._settings)
        record_payment_status(result.calculated_status.value)

        if result.calculated_status != contract.status:
            logger.info(
                "contract_status_drift",
                contract_id=contract_id,
                stored_status=contract.status.value,
                calculated_status=result.calculated_status.value,
            )

        return PaymentStatusResponse.from_result(
            contract_id,
            result,
            get_action_required(result, self._settings),
        )

    async def _load_contract(self, contract_id: str) -> Contract:
        contract = await self._contract_repo.get_contract(contract_id)

        if contract is None:
            logger.warning("contract_not_found", contract_id=contract_id)
            raise ContractNotFoundException(contract_id)

        return contract
