"""
Double-Period Drift Detection.

Installments generated before the renewal rules were enforced sometimes got
a second due date two billing periods after the first instead of one. This
module classifies a contract's installments as clean or flagged; the batch
loop that applies corrections lives in the application layer.
"""

from typing import Iterable, Optional

from src.domain.entities import Contract, Installment, InstallmentStatus

from .date_math import add_periods
from .models import AuditFinding
from .settings import BillingSettings, billing_settings

CORRECTABLE_STATUSES = (InstallmentStatus.PENDING, InstallmentStatus.CURRENT)


def is_correctable(installment: Installment) -> bool:
    """Paid (or otherwise settled) installments are immutable history."""
    return installment.status in CORRECTABLE_STATUSES


def classify_installments(
    contract: Contract,
    installments: Iterable[Installment],
    settings: BillingSettings = billing_settings,
) -> Optional[AuditFinding]:
    """
    Check a contract's first two installments for double-period drift.

    A contract is flagged when its second installment is still open and its
    due date is within the tolerance of `first + 2 periods` while being
    further than the tolerance from `first + 1 period`. Once corrected the
    second condition fails, so a correction is never reapplied.

    Args:
        contract: Contract the installments belong to
        installments: All of the contract's installments, any order
        settings: Billing settings (uses defaults if not provided)

    Returns:
        AuditFinding if flagged, None if clean
    """
    ordered = sorted(installments, key=lambda inst: inst.installment_number)
    if len(ordered) < 2:
        return None

    first, second = ordered[0], ordered[1]
    if not is_correctable(second):
        return None

    correct_due_date = add_periods(first.due_date, contract.billing_period, 1)
    wrong_due_date = add_periods(first.due_date, contract.billing_period, 2)

    tolerance = settings.audit_tolerance_days
    off_wrong = abs((second.due_date - wrong_due_date).days)
    off_correct = abs((second.due_date - correct_due_date).days)

    if off_wrong > tolerance or off_correct <= tolerance:
        return None

    return AuditFinding(
        contract_id=contract.id,
        contract_number=contract.contract_number,
        plan_id=contract.plan_id,
        billing_period=contract.billing_period,
        first_installment_id=first.id,
        first_due_date=first.due_date,
        installment_id=second.id,
        installment_number=second.installment_number,
        current_due_date=second.due_date,
        correct_due_date=correct_due_date,
    )
