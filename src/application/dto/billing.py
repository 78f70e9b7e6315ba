"""Data transfer objects for billing calculations."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from src.domain.entities import BillingCadence
from src.service.billing import RegularizationQuote, format_cents


@dataclass(frozen=True)
class CadenceRequest:
    """Input data for resolving or enforcing a plan's cadence."""
    plan_name: str
    requested_cadence: Optional[BillingCadence] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.plan_name or not self.plan_name.strip():
            errors.append("plan_name is required")

        return errors


@dataclass(frozen=True)
class CadenceResponse:
    plan_name: str
    cadence: str


@dataclass(frozen=True)
class RenewalRequest:
    """Input data for computing renewal dates."""
    original_start_date: date
    current_date: date
    cadence: BillingCadence


@dataclass(frozen=True)
class RenewalResponse:
    next_renewal_date: str
    current_period_due_date: str
    last_due_date: str


@dataclass(frozen=True)
class RegularizationRequest:
    """Input data for quoting a catch-up payment."""
    original_start_date: date
    current_date: date
    cadence: BillingCadence
    base_amount_cents: int
    last_paid_date: Optional[date] = None
    include_current_period: bool = True

    def validate(self) -> List[str]:
        errors = []

        if self.base_amount_cents <= 0:
            errors.append("base_amount_cents must be positive")

        if self.current_date < self.original_start_date:
            errors.append("current_date cannot precede original_start_date")

        if self.last_paid_date is not None and self.last_paid_date > self.current_date:
            errors.append("last_paid_date cannot be after current_date")

        return errors


@dataclass(frozen=True)
class RegularizationResponse:
    """Response data for a regularization quote."""

    overdue_periods: int
    periods_charged: int
    amount_cents: int
    amount_display: str
    received_date: str
    next_renewal_date: str
    contract_id: Optional[str] = None

    @classmethod
    def from_quote(
        cls,
        quote: RegularizationQuote,
        contract_id: Optional[str] = None,
    ) -> "RegularizationResponse":
        return cls(
            overdue_periods=quote.overdue_periods,
            periods_charged=quote.periods_charged,
            amount_cents=quote.amount_cents,
            amount_display=format_cents(quote.amount_cents),
            received_date=quote.received_date.isoformat(),
            next_renewal_date=quote.next_renewal_date.isoformat(),
            contract_id=contract_id,
        )
