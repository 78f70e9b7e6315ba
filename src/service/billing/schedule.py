"""Installment scheduling after a payment is recorded."""

from datetime import timedelta

from src.domain.entities import Contract, Installment, InstallmentStatus

from .renewal import calculate_next_renewal_date
from .settings import BillingSettings, billing_settings


def build_next_installment(
    contract: Contract,
    paid_installment: Installment,
    settings: BillingSettings = billing_settings,
) -> Installment:
    """
    Create the pending installment that follows a paid one.

    The due date is the first renewal after the paid installment's due date,
    anchored to the contract's original start date, so a late payment never
    shifts the schedule.

    Args:
        contract: Contract being renewed
        paid_installment: The installment that was just paid
        settings: Billing settings (uses defaults if not provided)

    Returns:
        A new pending Installment (not yet persisted)
    """
    due_date = calculate_next_renewal_date(
        contract.original_start_date,
        paid_installment.due_date,
        contract.billing_period,
    )

    if paid_installment.period_end is not None:
        period_start = paid_installment.period_end + timedelta(days=1)
    else:
        period_start = paid_installment.due_date

    return Installment(
        contract_id=contract.id,
        installment_number=paid_installment.installment_number + 1,
        due_date=due_date,
        status=InstallmentStatus.PENDING,
        amount_cents=contract.period_amount_cents,
        period_start=period_start,
        period_end=due_date + timedelta(days=settings.cycle_days(contract.billing_period)),
    )
