"""
Result models for the billing engine.

These are the value objects returned by the regularization, payment status
and audit calculations. All monetary values are integer cents.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from src.domain.entities import BillingCadence, ContractStatus


@dataclass(frozen=True)
class RegularizationQuote:
    """
    What to charge and record when a contract in arrears is paid.

    Attributes:
        overdue_periods: Complete billing periods overdue, excluding the
            current one
        periods_charged: Periods covered by this payment (always >= 1)
        amount_cents: Total to charge
        received_date: Date to record as received; always on the anchor day
        next_renewal_date: First renewal after the recorded received date
    """
    overdue_periods: int
    periods_charged: int
    amount_cents: int
    received_date: date
    next_renewal_date: date


@dataclass(frozen=True)
class PaymentStatusResult:
    """
    Billing status of a contract derived from its payment history.

    Attributes:
        calculated_status: Status the contract should be in
        is_overdue: True when the contract is not covered by a payment
        days_past_due: Days since expiration (0 when not expired)
        next_due_date: Next date a payment is expected, if known
        grace_period_ends: Last day of the grace period, while in it
        should_suspend: True when the contract must be suspended now
        should_cancel: True when the contract must be cancelled now
        status_reason: Human-readable explanation
        expiration_date: When the last payment stops covering the contract
        days_remaining: Days until expiration (0 once expired)
        is_expired: True when the last payment no longer covers today
    """
    calculated_status: ContractStatus
    is_overdue: bool
    days_past_due: int
    next_due_date: Optional[date]
    grace_period_ends: Optional[date]
    should_suspend: bool
    should_cancel: bool
    status_reason: str
    expiration_date: Optional[date]
    days_remaining: int
    is_expired: bool


@dataclass(frozen=True)
class AuditFinding:
    """A contract whose second installment shows double-period drift."""
    contract_id: str
    contract_number: str
    plan_id: str
    billing_period: BillingCadence
    first_installment_id: str
    first_due_date: date
    installment_id: str
    installment_number: int
    current_due_date: date
    correct_due_date: date
    plan_name: str = "Unknown"
