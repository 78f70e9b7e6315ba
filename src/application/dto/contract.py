"""Data transfer objects for contract billing status."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from src.service.billing import PaymentStatusResult


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class PaymentStatusResponse:
    """Response data for a contract's evaluated payment status."""

    contract_id: str
    calculated_status: str
    is_overdue: bool
    days_past_due: int
    days_remaining: int
    is_expired: bool
    should_suspend: bool
    should_cancel: bool
    status_reason: str
    next_due_date: Optional[str]
    expiration_date: Optional[str]
    grace_period_ends: Optional[str]
    action_required: Optional[str]

    @classmethod
    def from_result(
        cls,
        contract_id: str,
        result: PaymentStatusResult,
        action_required: Optional[str],
    ) -> "PaymentStatusResponse":
        return cls(
            contract_id=contract_id,
            calculated_status=result.calculated_status.value,
            is_overdue=result.is_overdue,
            days_past_due=result.days_past_due,
            days_remaining=result.days_remaining,
            is_expired=result.is_expired,
            should_suspend=result.should_suspend,
            should_cancel=result.should_cancel,
            status_reason=result.status_reason,
            next_due_date=_iso(result.next_due_date),
            expiration_date=_iso(result.expiration_date),
            grace_period_ends=_iso(result.grace_period_ends),
            action_required=action_required,
        )
