"""Contract billing API endpoints."""

from datetime import date
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from src.application.services import ContractBillingService
from src.core.dependencies import get_contract_billing_service
from src.presentation.schemas import (
    ErrorResponseSchema,
    PaymentStatusResponseSchema,
    RegularizationResponseSchema,
)

contracts_router = APIRouter(
    prefix="/contracts",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Contract not found"},
        503: {"model": ErrorResponseSchema, "description": "Contract store unavailable"},
    },
)

ContractIdPath = Annotated[UUID, Path(description="UUID of the contract")]
CurrentDateQuery = Annotated[
    Optional[date],
    Query(description="Reference date (defaults to today)"),
]


@contracts_router.get(
    "/{contract_id}/regularization",
    response_model=RegularizationResponseSchema,
    summary="Quote Contract Regularization",
    description="Quote what a stored contract owes, priced at its period amount.",
)
async def get_contract_regularization(
    contract_id: ContractIdPath,
    contract_service: Annotated[
        ContractBillingService, Depends(get_contract_billing_service)
    ],
    current_date: CurrentDateQuery = None,
) -> RegularizationResponseSchema:
    response = await contract_service.get_regularization_quote(
        str(contract_id),
        current_date or date.today(),
    )

    return RegularizationResponseSchema(**vars(response))


@contracts_router.get(
    "/{contract_id}/payment-status",
    response_model=PaymentStatusResponseSchema,
    summary="Evaluate Payment Status",
    description="""
    Evaluate the status a contract should have on the reference date.

    Coverage runs one billing period from the last payment, followed by
    the grace, suspension and cancellation windows.
    """,
)
async def get_contract_payment_status(
    contract_id: ContractIdPath,
    contract_service: Annotated[
        ContractBillingService, Depends(get_contract_billing_service)
    ],
    current_date: CurrentDateQuery = None,
) -> PaymentStatusResponseSchema:
    response = await contract_service.get_payment_status(
        str(contract_id),
        current_date or date.today(),
    )

    return PaymentStatusResponseSchema(**vars(response))
