"""
Plan Cadence Resolution.

Maps a plan name to the billing cadence it mandates and guards requested
cadences against it. The mapping is keyword based: plan names containing
one of the configured annual keywords (COMFORT, PLATINUM by default) are
billed annually, every other plan (BASIC, INFINITY, ...) monthly.

Renaming a plan changes its cadence, so every caller goes through
resolve_cadence() and nothing else inspects plan names.
"""

from typing import Optional, Union

from src.domain.entities import BillingCadence
from src.domain.exceptions import CadenceMismatchException

from .settings import BillingSettings, billing_settings

CadenceLike = Union[BillingCadence, str]


def normalize_plan_name(plan_name: str) -> str:
    return plan_name.strip().upper()


def resolve_cadence(
    plan_name: str,
    settings: BillingSettings = billing_settings,
) -> BillingCadence:
    """
    Determine the billing cadence a plan mandates.

    Args:
        plan_name: Plan display name, any case or surrounding whitespace
        settings: Billing settings (uses defaults if not provided)

    Returns:
        BillingCadence.ANNUAL if the name contains an annual keyword,
        BillingCadence.MONTHLY otherwise
    """
    normalized = normalize_plan_name(plan_name)

    if any(keyword in normalized for keyword in settings.annual_plan_keywords):
        return BillingCadence.ANNUAL

    return BillingCadence.MONTHLY


def is_annual_plan(
    plan_name: str,
    settings: BillingSettings = billing_settings,
) -> bool:
    return resolve_cadence(plan_name, settings) == BillingCadence.ANNUAL


def is_compatible(
    plan_name: str,
    requested_cadence: CadenceLike,
    settings: BillingSettings = billing_settings,
) -> bool:
    """True iff the requested cadence is the one the plan mandates."""
    return requested_cadence == resolve_cadence(plan_name, settings)


def enforce_cadence(
    plan_name: str,
    requested_cadence: Optional[CadenceLike] = None,
    settings: BillingSettings = billing_settings,
) -> BillingCadence:
    """
    Validate a requested cadence and return the plan's mandated cadence.

    Args:
        plan_name: Plan display name
        requested_cadence: Cadence asked for by the caller, if any
        settings: Billing settings (uses defaults if not provided)

    Returns:
        The plan's mandated cadence

    Raises:
        CadenceMismatchException: If a cadence was requested and it
            differs from the mandated one
    """
    correct = resolve_cadence(plan_name, settings)

    if requested_cadence is not None and requested_cadence != correct:
        raise CadenceMismatchException(
            plan_name=plan_name,
            requested_cadence=_cadence_value(requested_cadence),
            correct_cadence=correct.value,
        )

    return correct


def _cadence_value(cadence: CadenceLike) -> str:
    if isinstance(cadence, BillingCadence):
        return cadence.value
    return str(cadence)
