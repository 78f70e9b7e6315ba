"""Contract and installment domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import uuid4


class BillingCadence(str, Enum):
    """Recurrence unit for charging a contract."""

    MONTHLY = "monthly"
    ANNUAL = "annual"


class ContractStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    CANCELLED = "cancelled"
    PENDING = "pending"


class InstallmentStatus(str, Enum):
    PENDING = "pending"
    CURRENT = "current"
    PAID = "paid"
    OVERDUE = "overdue"


@dataclass
class Installment:
    """A single billing period charge belonging to a contract."""

    contract_id: str
    installment_number: int
    due_date: date
    status: InstallmentStatus = InstallmentStatus.PENDING
    amount_cents: int = 0
    period_start: Optional[date] = None
    period_end: Optional[date] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    paid_at: Optional[datetime] = None

    @property
    def is_paid(self) -> bool:
        return self.status == InstallmentStatus.PAID

    def to_dict(self) -> dict:
        return {
            "installment_id": self.id,
            "installment_number": self.installment_number,
            "due_date": self.due_date.isoformat(),
            "amount_cents": self.amount_cents,
            "status": self.status.value,
        }


@dataclass
class Contract:
    """
    A pet plan contract.

    `original_start_date` is the anchor for every renewal and
    regularization calculation and is never mutated after creation.
    `last_paid_date` is None until the first payment is recorded.
    """

    contract_number: str
    plan_id: str
    original_start_date: date
    billing_period: BillingCadence
    last_paid_date: Optional[date] = None
    status: ContractStatus = ContractStatus.ACTIVE
    monthly_amount_cents: int = 0
    annual_amount_cents: Optional[int] = None
    payment_approved: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def is_annual(self) -> bool:
        return self.billing_period == BillingCadence.ANNUAL

    @property
    def period_amount_cents(self) -> int:
        """Amount charged for one billing period of this contract."""
        if self.is_annual and self.annual_amount_cents is not None:
            return self.annual_amount_cents
        return self.monthly_amount_cents
