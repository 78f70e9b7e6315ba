"""Contract status Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import ContractStatus


class PaymentStatusResponseSchema(BaseModel):
    """Schema for GET /v1/contracts/{contract_id}/payment-status response."""

    contract_id: str = Field(..., description="UUID of the contract")
    calculated_status: ContractStatus = Field(
        ...,
        description="Status the contract should have on the reference date",
        examples=["inactive"],
    )
    is_overdue: bool
    days_past_due: int = Field(..., ge=0, examples=[3])
    days_remaining: int = Field(..., ge=0, examples=[0])
    is_expired: bool
    should_suspend: bool
    should_cancel: bool
    status_reason: str = Field(
        ...,
        examples=["Expired 3 days ago - 12 days left in grace period"],
    )
    next_due_date: Optional[date] = None
    expiration_date: Optional[date] = None
    grace_period_ends: Optional[date] = None
    action_required: Optional[str] = Field(
        None,
        description="Customer-facing action message",
        examples=["Plan expired - 12 days left to renew"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "contract_id": "550e8400-e29b-41d4-a716-446655440000",
                    "calculated_status": "inactive",
                    "is_overdue": True,
                    "days_past_due": 3,
                    "days_remaining": 0,
                    "is_expired": True,
                    "should_suspend": False,
                    "should_cancel": False,
                    "status_reason": "Expired 3 days ago - 12 days left in grace period",
                    "next_due_date": "2024-03-15",
                    "expiration_date": "2024-03-15",
                    "grace_period_ends": "2024-03-30",
                    "action_required": "Plan expired - 12 days left to renew",
                }
            ]
        }
    )
