"""Billing calculation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import CadenceRequest, RegularizationRequest, RenewalRequest
from src.application.services import BillingService
from src.core.dependencies import get_billing_service
from src.presentation.schemas import (
    CadenceRequestSchema,
    CadenceResponseSchema,
    ErrorResponseSchema,
    RegularizationRequestSchema,
    RegularizationResponseSchema,
    RenewalRequestSchema,
    RenewalResponseSchema,
)

billing_router = APIRouter(
    prefix="/billing",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


@billing_router.post(
    "/cadence",
    response_model=CadenceResponseSchema,
    summary="Resolve Plan Cadence",
    description="""
    Resolve the billing cadence a plan must use.

    When `requested_cadence` is given and does not match, the request is
    rejected with 422 and code CADENCE_MISMATCH.
    """,
    responses={
        422: {"model": ErrorResponseSchema, "description": "Cadence mismatch"},
    },
)
async def check_cadence(
    request: CadenceRequestSchema,
    billing_service: Annotated[BillingService, Depends(get_billing_service)],
) -> CadenceResponseSchema:
    response = billing_service.check_cadence(
        CadenceRequest(
            plan_name=request.plan_name,
            requested_cadence=request.requested_cadence,
        )
    )

    return CadenceResponseSchema(
        plan_name=response.plan_name,
        cadence=response.cadence,
    )


@billing_router.post(
    "/renewal",
    response_model=RenewalResponseSchema,
    summary="Compute Renewal Dates",
    description="Anchored renewal dates around a reference date.",
)
async def get_renewal_schedule(
    request: RenewalRequestSchema,
    billing_service: Annotated[BillingService, Depends(get_billing_service)],
) -> RenewalResponseSchema:
    response = billing_service.get_renewal_schedule(
        RenewalRequest(
            original_start_date=request.original_start_date,
            current_date=request.current_date,
            cadence=request.cadence,
        )
    )

    return RenewalResponseSchema(
        next_renewal_date=response.next_renewal_date,
        current_period_due_date=response.current_period_due_date,
        last_due_date=response.last_due_date,
    )


@billing_router.post(
    "/regularization",
    response_model=RegularizationResponseSchema,
    summary="Quote Regularization",
    description="""
    Quote a catch-up payment for a contract in arrears.

    Charges every complete overdue period plus the current one (at least
    one period) and returns the anchored date to record as received.
    """,
)
async def quote_regularization(
    request: RegularizationRequestSchema,
    billing_service: Annotated[BillingService, Depends(get_billing_service)],
) -> RegularizationResponseSchema:
    dto = RegularizationRequest(
        original_start_date=request.original_start_date,
        current_date=request.current_date,
        cadence=request.cadence,
        base_amount_cents=request.base_amount_cents,
        last_paid_date=request.last_paid_date,
        include_current_period=request.include_current_period,
    )

    response = billing_service.quote_regularization(dto)

    return RegularizationResponseSchema(**vars(response))
