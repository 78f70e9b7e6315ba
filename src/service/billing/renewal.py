"""
Renewal Date Calculation.

Every renewal date traces back to the contract's original start date (the
anchor): its day-of-month for monthly contracts, its month and day for
annual ones. Intervening payment dates never move the schedule.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from src.domain.entities import BillingCadence

from .date_math import add_months


def anchor_day_in_month(anchor: date, year: int, month: int) -> date:
    """The anchor's day-of-month in the given month, clamped to its length."""
    return date(year, month, 1) + relativedelta(day=anchor.day)


def anniversary_in_year(anchor: date, year: int) -> date:
    """The anchor's month/day in the given year (Feb 29 -> Feb 28 if needed)."""
    return date(year, anchor.month, 1) + relativedelta(day=anchor.day)


def calculate_next_renewal_date(
    original_start_date: date,
    current_date: date,
    cadence: BillingCadence,
) -> date:
    """
    Find the first renewal date strictly after `current_date`.

    Monthly contracts walk month by month from the current month, using the
    anchor day clamped to each month's length (anchor day 31 renews on the
    30th in 30-day months). Annual contracts renew on the anchor's month and
    day, this year if still ahead, otherwise next year.

    Args:
        original_start_date: Contract anchor date
        current_date: Reference "now"
        cadence: Contract billing cadence

    Returns:
        The next renewal date
    """
    if BillingCadence(cadence) == BillingCadence.MONTHLY:
        month_start = current_date.replace(day=1)
        while True:
            candidate = anchor_day_in_month(
                original_start_date, month_start.year, month_start.month
            )
            if candidate > current_date:
                return candidate
            month_start = add_months(month_start, 1)

    anniversary = anniversary_in_year(original_start_date, current_date.year)
    if anniversary <= current_date:
        anniversary = anniversary_in_year(original_start_date, current_date.year + 1)
    return anniversary


def calculate_current_period_due_date(
    original_start_date: date,
    current_date: date,
    cadence: BillingCadence,
) -> date:
    """Anchor-aligned due date falling in the current month (or year)."""
    if BillingCadence(cadence) == BillingCadence.MONTHLY:
        return anchor_day_in_month(
            original_start_date, current_date.year, current_date.month
        )
    return anniversary_in_year(original_start_date, current_date.year)


def calculate_last_due_date(
    original_start_date: date,
    current_date: date,
    cadence: BillingCadence,
) -> date:
    """Most recent anchor-aligned due date strictly before `current_date`."""
    candidate = calculate_current_period_due_date(
        original_start_date, current_date, cadence
    )
    if candidate < current_date:
        return candidate

    if BillingCadence(cadence) == BillingCadence.MONTHLY:
        previous = add_months(current_date.replace(day=1), -1)
        return anchor_day_in_month(original_start_date, previous.year, previous.month)
    return anniversary_in_year(original_start_date, current_date.year - 1)
