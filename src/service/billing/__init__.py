"""
Billing Engine for pet plan contracts
"""

from .models import AuditFinding, PaymentStatusResult, RegularizationQuote
from .settings import BillingSettings, billing_settings
from .cadence import enforce_cadence, is_annual_plan, is_compatible, resolve_cadence
from .date_math import add_months, add_periods, add_years
from .renewal import (
    calculate_current_period_due_date,
    calculate_last_due_date,
    calculate_next_renewal_date,
)
from .regularization import (
    calculate_overdue_periods,
    calculate_regularization_amount,
    calculate_regularization_received_date,
    build_regularization_quote,
    quote_regularization,
)
from .payment_status import evaluate_payment_status, get_action_required
from .schedule import build_next_installment
from .audit import classify_installments
from .money import format_cents, to_cents

__all__ = [
    # Settings
    "BillingSettings",
    "billing_settings",
    # Models
    "AuditFinding",
    "PaymentStatusResult",
    "RegularizationQuote",
    # Cadence
    "resolve_cadence",
    "is_annual_plan",
    "is_compatible",
    "enforce_cadence",
    # Date Math
    "add_months",
    "add_years",
    "add_periods",
    # Renewal
    "calculate_next_renewal_date",
    "calculate_current_period_due_date",
    "calculate_last_due_date",
    # Regularization
    "calculate_overdue_periods",
    "calculate_regularization_received_date",
    "calculate_regularization_amount",
    "build_regularization_quote",
    "quote_regularization",
    # Payment Status
    "evaluate_payment_status",
    "get_action_required",
    # Scheduling
    "build_next_installment",
    # Audit
    "classify_installments",
    # Money
    "to_cents",
    "format_cents",
]
