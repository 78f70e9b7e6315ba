"""Billing calculation Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.domain.entities import BillingCadence


class CadenceRequestSchema(BaseModel):
    """Schema for POST /v1/billing/cadence request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"plan_name": "Comfort Plus", "requested_cadence": "annual"},
            ]
        }
    )

    plan_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Display name of the plan",
        examples=["Comfort Plus"],
    )
    requested_cadence: Optional[BillingCadence] = Field(
        None,
        description="Cadence the caller wants to bill with; omitted to just resolve it",
        examples=["annual"],
    )

    @field_validator("plan_name")
    @classmethod
    def validate_plan_name(cls, v: str) -> str:
        """Ensure plan_name is not just whitespace."""
        if not v.strip():
            raise ValueError("plan_name cannot be empty or whitespace")
        return v


class CadenceResponseSchema(BaseModel):
    """Schema for POST /v1/billing/cadence response body."""

    plan_name: str = Field(..., description="Plan name as received")
    cadence: BillingCadence = Field(
        ...,
        description="Cadence the plan must be billed with",
        examples=["annual"],
    )


class RenewalRequestSchema(BaseModel):
    """Schema for POST /v1/billing/renewal request body."""

    original_start_date: date = Field(
        ...,
        description="Contract anchor date",
        examples=["2024-01-31"],
    )
    current_date: date = Field(
        default_factory=date.today,
        description="Reference date (defaults to today)",
        examples=["2024-02-10"],
    )
    cadence: BillingCadence = Field(..., examples=["monthly"])


class RenewalResponseSchema(BaseModel):
    """Schema for POST /v1/billing/renewal response body."""

    next_renewal_date: date = Field(
        ...,
        description="First renewal strictly after current_date",
        examples=["2024-02-29"],
    )
    current_period_due_date: date = Field(
        ...,
        description="Due date of the period containing current_date",
        examples=["2024-01-31"],
    )
    last_due_date: date = Field(
        ...,
        description="Most recent due date strictly before current_date",
        examples=["2024-01-31"],
    )


class RegularizationRequestSchema(BaseModel):
    """Schema for POST /v1/billing/regularization request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "original_start_date": "2023-05-31",
                    "current_date": "2023-09-10",
                    "cadence": "monthly",
                    "base_amount_cents": 5000,
                }
            ]
        }
    )

    original_start_date: date = Field(..., description="Contract anchor date")
    current_date: date = Field(
        default_factory=date.today,
        description="Date the payment is processed (defaults to today)",
    )
    cadence: BillingCadence
    base_amount_cents: int = Field(
        ...,
        gt=0,
        description="Price of one billing period in cents",
        examples=[5000],
    )
    last_paid_date: Optional[date] = Field(
        None,
        description="Last recorded payment; omitted if the contract was never paid",
    )
    include_current_period: bool = Field(
        True,
        description="Charge the current period on top of the overdue ones",
    )

    @model_validator(mode="after")
    def validate_dates(self) -> "RegularizationRequestSchema":
        if self.current_date < self.original_start_date:
            raise ValueError("current_date cannot precede original_start_date")
        return self


class RegularizationResponseSchema(BaseModel):
    """Schema for a regularization quote."""

    contract_id: Optional[str] = Field(
        None,
        description="Contract the quote was computed for, if any",
    )
    overdue_periods: int = Field(
        ...,
        ge=0,
        description="Complete periods overdue, excluding the current one",
        examples=[2],
    )
    periods_charged: int = Field(..., ge=1, examples=[3])
    amount_cents: int = Field(..., ge=0, examples=[15000])
    amount_display: str = Field(
        ...,
        description="Amount in major units",
        examples=["150.00"],
    )
    received_date: date = Field(
        ...,
        description="Date to record the payment as received",
        examples=["2023-08-31"],
    )
    next_renewal_date: date = Field(..., examples=["2023-09-30"])
