"""
Billing Settings for the pet plan billing engine.

This module holds every tunable constant of the billing rules: which plan
keywords mandate annual billing, the day-count buckets used to estimate
overdue periods, and the grace/cancellation windows of the payment status
evaluator.

Environment variables use the BILLING_ prefix:
    BILLING_ANNUAL_PLAN_KEYWORDS='["COMFORT", "PLATINUM"]'
    BILLING_GRACE_PERIOD_DAYS=15
    BILLING_AUDIT_TOLERANCE_DAYS=1

Usage:
    from src.service.billing.settings import billing_settings

    days = billing_settings.cycle_days(BillingCadence.MONTHLY)

    # Or create custom settings for testing
    custom = BillingSettings(grace_period_days=5)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities import BillingCadence


class BillingSettings(BaseSettings):
    """
    Configurable parameters for the billing rules.

    All settings can be overridden via environment variables with BILLING_ prefix.
    All durations are in days.
    """

    model_config = SettingsConfigDict(
        env_prefix="BILLING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Plan Cadence ===
    annual_plan_keywords: List[str] = Field(
        default=["COMFORT", "PLATINUM"],
        description="Plan name keywords that mandate annual billing; all other plans are monthly",
    )

    # === Overdue Period Buckets ===
    monthly_cycle_days: int = Field(
        default=30,
        gt=0,
        description="Days counted as one monthly period when estimating overdue periods",
    )
    annual_cycle_days: int = Field(
        default=365,
        gt=0,
        description="Days counted as one annual period when estimating overdue periods",
    )

    # === Payment Status Windows ===
    grace_period_days: int = Field(
        default=15,
        ge=0,
        description="Days after expiration during which a contract is only inactive",
    )
    cancellation_days: int = Field(
        default=60,
        ge=0,
        description="Days after expiration beyond which a contract is cancelled",
    )
    renewal_warning_days: int = Field(
        default=5,
        ge=0,
        description="Days before expiration at which renewal is flagged as due soon",
    )

    # === Installment Audit ===
    audit_tolerance_days: int = Field(
        default=1,
        ge=0,
        description="Tolerance when matching a due date against an expected date",
    )

    @field_validator("annual_plan_keywords")
    @classmethod
    def normalize_keywords(cls, v: List[str]) -> List[str]:
        """Keywords are matched against uppercased, trimmed plan names."""
        keywords = [keyword.strip().upper() for keyword in v]
        if any(not keyword for keyword in keywords):
            raise ValueError("annual_plan_keywords cannot contain empty keywords")
        return keywords

    @model_validator(mode="after")
    def validate_windows(self) -> "BillingSettings":
        if self.cancellation_days < self.grace_period_days:
            raise ValueError(
                f"cancellation_days ({self.cancellation_days}) < "
                f"grace_period_days ({self.grace_period_days})"
            )
        return self

    def cycle_days(self, cadence: BillingCadence) -> int:
        """Length in days of one billing period bucket for a cadence."""
        if BillingCadence(cadence) == BillingCadence.ANNUAL:
            return self.annual_cycle_days
        return self.monthly_cycle_days


@lru_cache
def get_billing_settings() -> BillingSettings:
    """Get cached billing settings instance."""
    return BillingSettings()


billing_settings = get_billing_settings()
