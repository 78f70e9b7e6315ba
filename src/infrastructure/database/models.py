"""SQLAlchemy ORM models for contract billing records."""

from datetime import datetime, date
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class PlanModel(Base):
    """Persisted plan record (only the columns billing reads)."""

    __tablename__ = "plans"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )

    contracts: Mapped[list["ContractModel"]] = relationship(
        "ContractModel",
        back_populates="plan",
    )


class ContractModel(Base):
    """Persisted contract record."""

    __tablename__ = "contracts"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    plan_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("plans.id"),
        nullable=False,
    )
    contract_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    billing_period: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="monthly",
    )
    monthly_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    annual_amount: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    received_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    payment_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )

    plan: Mapped["PlanModel"] = relationship(
        "PlanModel",
        back_populates="contracts",
    )
    installments: Mapped[list["ContractInstallmentModel"]] = relationship(
        "ContractInstallmentModel",
        back_populates="contract",
        cascade="all, delete-orphan",
        order_by="ContractInstallmentModel.installment_number",
    )


class ContractInstallmentModel(Base):
    """Persisted installment record within a contract."""

    __tablename__ = "contract_installments"
    __table_args__ = (
        UniqueConstraint("contract_id", "installment_number"),
    )

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    contract_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("contracts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    installment_number: Mapped[int] = mapped_column(Integer, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    period_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    period_end: Mapped[date | None] = mapped_column(Date, nullable=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="pending",
    )
    paid_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )

    contract: Mapped["ContractModel"] = relationship(
        "ContractModel",
        back_populates="installments",
    )
