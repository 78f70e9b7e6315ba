"""Billing service - cadence, renewal and regularization use cases."""

import structlog

from src.core.metrics import record_cadence_check, record_regularization_quote
from src.domain.entities import BillingCadence
from src.domain.exceptions import CadenceMismatchException, InvalidBillingRequestException
from src.application.dto import (
    CadenceRequest,
    CadenceResponse,
    RegularizationRequest,
    RegularizationResponse,
    RenewalRequest,
    RenewalResponse,
)
from src.service.billing import (
    BillingSettings,
    billing_settings,
    build_regularization_quote,
    calculate_current_period_due_date,
    calculate_last_due_date,
    calculate_next_renewal_date,
    enforce_cadence,
    is_compatible,
)

logger = structlog.get_logger(__name__)


class BillingService:
    """
    Application service for stateless billing calculations.

    Wraps the pure billing engine with request validation and logging.
    """

    def __init__(self, settings: BillingSettings = billing_settings):
        self._settings = settings

    def check_cadence(self, request: CadenceRequest) -> CadenceResponse:
        """
        Resolve a plan's cadence, enforcing the requested one if given.

        Raises:
            InvalidBillingRequestException: If request validation fails
            CadenceMismatchException: If the requested cadence is wrong
        """
        errors = request.validate()
        if errors:
            raise InvalidBillingRequestException("; ".join(errors))

        if request.requested_cadence is not None:
            record_cadence_check(
                is_compatible(request.plan_name, request.requested_cadence, self._settings)
            )

        try:
            cadence = enforce_cadence(
                request.plan_name,
                request.requested_cadence,
                self._settings,
            )
        except CadenceMismatchException as exc:
            logger.warning(
                "cadence_mismatch",
                plan_name=exc.plan_name,
                requested_cadence=exc.requested_cadence,
                correct_cadence=exc.correct_cadence,
            )
            raise

        return CadenceResponse(plan_name=request.plan_name, cadence=cadence.value)

    def get_renewal_schedule(self, request: RenewalRequest) -> RenewalResponse:
        """Compute the renewal dates around `current_date` for an anchor."""
        args = (request.original_start_date, request.current_date, request.cadence)

        return RenewalResponse(
            next_renewal_date=calculate_next_renewal_date(*args).isoformat(),
            current_period_due_date=calculate_current_period_due_date(*args).isoformat(),
            last_due_date=calculate_last_due_date(*args).isoformat(),
        )

    def quote_regularization(
        self,
        request: RegularizationRequest,
    ) -> RegularizationResponse:
        """
        Quote a catch-up payment from raw contract terms.

        Raises:
            InvalidBillingRequestException: If request validation fails
        """
        errors = request.validate()
        if errors:
            raise InvalidBillingRequestException("; ".join(errors))

        quote = build_regularization_quote(
            original_start_date=request.original_start_date,
            last_paid_date=request.last_paid_date,
            current_date=request.current_date,
            cadence=request.cadence,
            base_amount_cents=request.base_amount_cents,
            include_current_period=request.include_current_period,
            settings=self._settings,
        )

        logger.info(
            "regularization_quoted",
            cadence=BillingCadence(request.cadence).value,
            overdue_periods=quote.overdue_periods,
            periods_charged=quote.periods_charged,
            amount_cents=quote.amount_cents,
        )

        record_regularization_quote(
            BillingCadence(request.cadence).value, quote.periods_charged
        )

        return RegularizationResponse.from_quote(quote)
