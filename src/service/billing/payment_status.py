"""
Payment Status Evaluation.

A payment covers a contract for one billing period from the date it was
received. Once that coverage expires the contract goes through three
windows:

    expired <= grace_period_days          -> inactive (grace period)
    grace_period_days < expired <= cancellation_days -> suspended
    expired > cancellation_days           -> cancelled

Contracts manually cancelled or suspended keep that status.
"""

from datetime import date, timedelta
from typing import Dict, Iterable, Optional

from src.domain.entities import Contract, ContractStatus

from .date_math import add_periods
from .models import PaymentStatusResult
from .settings import BillingSettings, billing_settings


def calculate_expiration_date(contract: Contract) -> Optional[date]:
    """Date the last payment stops covering the contract (None if unpaid)."""
    if contract.last_paid_date is None:
        return None
    return add_periods(contract.last_paid_date, contract.billing_period, 1)


def evaluate_payment_status(
    contract: Contract,
    current_date: date,
    settings: BillingSettings = billing_settings,
) -> PaymentStatusResult:
    """
    Determine the status a contract should be in on `current_date`.

    Args:
        contract: Contract to evaluate
        current_date: Reference "now"
        settings: Billing settings (uses defaults if not provided)

    Returns:
        PaymentStatusResult describing status, expiration and required actions
    """
    expiration_date = calculate_expiration_date(contract)
    if expiration_date is None:
        days_remaining = 0
        is_expired = True
    else:
        days_remaining = max(0, (expiration_date - current_date).days)
        is_expired = current_date >= expiration_date

    if contract.status == ContractStatus.CANCELLED:
        return PaymentStatusResult(
            calculated_status=ContractStatus.CANCELLED,
            is_overdue=False,
            days_past_due=0,
            next_due_date=None,
            grace_period_ends=None,
            should_suspend=False,
            should_cancel=False,
            status_reason="Contract manually cancelled",
            expiration_date=expiration_date,
            days_remaining=days_remaining,
            is_expired=is_expired,
        )

    if contract.status == ContractStatus.SUSPENDED:
        return PaymentStatusResult(
            calculated_status=ContractStatus.SUSPENDED,
            is_overdue=True,
            days_past_due=0,
            next_due_date=None,
            grace_period_ends=None,
            should_suspend=False,
            should_cancel=False,
            status_reason="Contract manually suspended",
            expiration_date=expiration_date,
            days_remaining=days_remaining,
            is_expired=is_expired,
        )

    if not contract.payment_approved or expiration_date is None:
        return PaymentStatusResult(
            calculated_status=ContractStatus.INACTIVE,
            is_overdue=True,
            days_past_due=0,
            next_due_date=None,
            grace_period_ends=None,
            should_suspend=False,
            should_cancel=False,
            status_reason="Payment not received or not approved",
            expiration_date=expiration_date,
            days_remaining=days_remaining,
            is_expired=is_expired,
        )

    if not is_expired:
        if days_remaining <= settings.renewal_warning_days:
            reason = f"Active - {days_remaining} days remaining (renewal due soon)"
        else:
            reason = f"Active - {days_remaining} days remaining"
        return PaymentStatusResult(
            calculated_status=ContractStatus.ACTIVE,
            is_overdue=False,
            days_past_due=0,
            next_due_date=expiration_date,
            grace_period_ends=None,
            should_suspend=False,
            should_cancel=False,
            status_reason=reason,
            expiration_date=expiration_date,
            days_remaining=days_remaining,
            is_expired=False,
        )

    days_since_expiration = (current_date - expiration_date).days

    if days_since_expiration <= settings.grace_period_days:
        grace_days_left = settings.grace_period_days - days_since_expiration
        return PaymentStatusResult(
            calculated_status=ContractStatus.INACTIVE,
            is_overdue=True,
            days_past_due=days_since_expiration,
            next_due_date=expiration_date,
            grace_period_ends=expiration_date + timedelta(days=settings.grace_period_days),
            should_suspend=False,
            should_cancel=False,
            status_reason=(
                f"Expired {days_since_expiration} days ago - "
                f"{grace_days_left} days left in grace period"
            ),
            expiration_date=expiration_date,
            days_remaining=0,
            is_expired=True,
        )

    if days_since_expiration <= settings.cancellation_days:
        return PaymentStatusResult(
            calculated_status=ContractStatus.SUSPENDED,
            is_overdue=True,
            days_past_due=days_since_expiration,
            next_due_date=expiration_date,
            grace_period_ends=None,
            should_suspend=True,
            should_cancel=False,
            status_reason=f"Suspended - expired {days_since_expiration} days ago",
            expiration_date=expiration_date,
            days_remaining=0,
            is_expired=True,
        )

    return PaymentStatusResult(
        calculated_status=ContractStatus.CANCELLED,
        is_overdue=True,
        days_past_due=days_since_expiration,
        next_due_date=expiration_date,
        grace_period_ends=None,
        should_suspend=False,
        should_cancel=True,
        status_reason=f"Cancelled - expired {days_since_expiration} days ago",
        expiration_date=expiration_date,
        days_remaining=0,
        is_expired=True,
    )


def get_action_required(
    result: PaymentStatusResult,
    settings: BillingSettings = billing_settings,
) -> Optional[str]:
    """Customer-facing action message for a status result, if any."""
    if result.calculated_status == ContractStatus.ACTIVE:
        if 0 < result.days_remaining <= settings.renewal_warning_days:
            return f"Renewal required in {result.days_remaining} days"
        return None

    if result.is_expired and result.grace_period_ends is not None:
        days_left = settings.grace_period_days - result.days_past_due
        return f"Plan expired - {days_left} days left to renew"

    if result.calculated_status == ContractStatus.INACTIVE:
        if result.expiration_date is not None:
            return "Plan expired - renewal required"
        return "Payment not completed - contact us to activate the plan"

    if result.calculated_status == ContractStatus.SUSPENDED:
        return "Plan suspended for lack of renewal - contact us"

    if result.calculated_status == ContractStatus.CANCELLED:
        return "Plan cancelled - contact us to reactivate"

    return None


def evaluate_contracts(
    contracts: Iterable[Contract],
    current_date: date,
    settings: BillingSettings = billing_settings,
) -> Dict[str, PaymentStatusResult]:
    """Evaluate many contracts at once, keyed by contract ID."""
    return {
        contract.id: evaluate_payment_status(contract, current_date, settings)
        for contract in contracts
    }
