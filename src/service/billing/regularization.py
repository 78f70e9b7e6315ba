"""
Regularization (catch-up billing) for contracts in arrears.

When a late payment arrives, the contract is charged for every complete
overdue period plus the current one, and the payment is recorded on the
contract's anchor day rather than the day it actually landed, so the
schedule never drifts towards payment dates.
"""

from datetime import date
from typing import Optional

from src.domain.entities import BillingCadence, Contract

from .date_math import add_months
from .models import RegularizationQuote
from .renewal import (
    anchor_day_in_month,
    anniversary_in_year,
    calculate_next_renewal_date,
)
from .settings import BillingSettings, billing_settings


def calculate_overdue_periods(
    last_paid_date: Optional[date],
    current_date: date,
    cadence: BillingCadence,
    original_start_date: date,
    settings: BillingSettings = billing_settings,
) -> int:
    """
    Count complete billing periods overdue, excluding the current one.

    Elapsed days since the last payment (or the anchor, if never paid) are
    bucketed into fixed 30-day (monthly) or 365-day (annual) periods. This is
    a day-count approximation, not calendar-exact; charge amounts depend on
    it, so it stays as-is until the business rule says otherwise.

    Args:
        last_paid_date: Date of the last recorded payment, None if never paid
        current_date: Reference "now"
        cadence: Contract billing cadence
        original_start_date: Contract anchor date
        settings: Billing settings (uses defaults if not provided)

    Returns:
        Number of overdue periods (>= 0)
    """
    reference_date = last_paid_date or original_start_date
    days_elapsed = (current_date - reference_date).days

    complete_periods = days_elapsed // settings.cycle_days(cadence)

    return max(0, complete_periods - 1)


def calculate_regularization_received_date(
    original_start_date: date,
    current_date: date,
    cadence: BillingCadence,
) -> date:
    """
    Date to record as received for a regularization payment.

    Monthly: this month's anchor day if it has been reached, otherwise the
    previous month's (both clamped to month length). Annual: this year's
    anniversary if reached, otherwise last year's.
    """
    if BillingCadence(cadence) == BillingCadence.MONTHLY:
        billing_day = anchor_day_in_month(
            original_start_date, current_date.year, current_date.month
        )
        if current_date.day < billing_day.day:
            previous = add_months(current_date.replace(day=1), -1)
            return anchor_day_in_month(
                original_start_date, previous.year, previous.month
            )
        return billing_day

    anniversary = anniversary_in_year(original_start_date, current_date.year)
    if current_date < anniversary:
        return anniversary_in_year(original_start_date, current_date.year - 1)
    return anniversary


def calculate_regularization_amount(
    base_amount: int,
    overdue_periods: int,
    include_current_period: bool = True,
) -> int:
    """
    Total to charge, in the same minor units as `base_amount`.

    At least one period is always charged.
    """
    total_periods = overdue_periods + 1 if include_current_period else overdue_periods

    return base_amount * max(1, total_periods)


def build_regularization_quote(
    original_start_date: date,
    last_paid_date: Optional[date],
    current_date: date,
    cadence: BillingCadence,
    base_amount_cents: int,
    include_current_period: bool = True,
    settings: BillingSettings = billing_settings,
) -> RegularizationQuote:
    """
    Combine overdue periods, amount and received date into one quote.

    Args:
        original_start_date: Contract anchor date
        last_paid_date: Date of the last recorded payment, None if never paid
        current_date: Date the payment is processed
        cadence: Contract billing cadence
        base_amount_cents: Price of one billing period
        include_current_period: Whether the current period is charged too
        settings: Billing settings (uses defaults if not provided)

    Returns:
        RegularizationQuote with amount and dates to record
    """
    overdue_periods = calculate_overdue_periods(
        last_paid_date,
        current_date,
        cadence,
        original_start_date,
        settings,
    )
    total_periods = overdue_periods + 1 if include_current_period else overdue_periods

    received_date = calculate_regularization_received_date(
        original_start_date,
        current_date,
        cadence,
    )

    return RegularizationQuote(
        overdue_periods=overdue_periods,
        periods_charged=max(1, total_periods),
        amount_cents=calculate_regularization_amount(
            base_amount_cents, overdue_periods, include_current_period
        ),
        received_date=received_date,
        next_renewal_date=calculate_next_renewal_date(
            original_start_date,
            received_date,
            cadence,
        ),
    )


def quote_regularization(
    contract: Contract,
    current_date: date,
    base_amount_cents: Optional[int] = None,
    include_current_period: bool = True,
    settings: BillingSettings = billing_settings,
) -> RegularizationQuote:
    """Regularization quote for a stored contract, priced at its period amount by default."""
    if base_amount_cents is None:
        base_amount_cents = contract.period_amount_cents

    return build_regularization_quote(
        contract.original_start_date,
        contract.last_paid_date,
        current_date,
        contract.billing_period,
        base_amount_cents,
        include_current_period,
        settings,
    )
