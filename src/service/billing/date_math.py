"""
Calendar arithmetic primitives.

Every function here is total: when a day-of-month does not exist in the
target month (Jan 31 + 1 month, Feb 29 + 1 year) the result is clamped to
the last valid day of that month instead of overflowing into the next one.
relativedelta already clamps this way.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from src.domain.entities import BillingCadence


def add_months(value: date, months: int) -> date:
    """
    Add (or, with a negative count, subtract) calendar months.

    Examples:
        add_months(date(2024, 1, 31), 1)  -> 2024-02-29
        add_months(date(2023, 1, 31), 1)  -> 2023-02-28
        add_months(date(2024, 3, 31), -1) -> 2024-02-29
    """
    return value + relativedelta(months=months)


def add_years(value: date, years: int) -> date:
    """Add calendar years; Feb 29 lands on Feb 28 in non-leap years."""
    return value + relativedelta(years=years)


def add_periods(value: date, cadence: BillingCadence, periods: int = 1) -> date:
    """Shift a date by whole billing periods of the given cadence."""
    if BillingCadence(cadence) == BillingCadence.ANNUAL:
        return add_years(value, periods)
    return add_months(value, periods)
