"""PostgreSQL repository implementation for contracts and installments."""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import (
    BillingCadence,
    Contract,
    ContractStatus,
    Installment,
    InstallmentStatus,
)
from src.domain.exceptions import DataAccessException
from src.domain.interfaces import ContractRepository
from src.infrastructure.database.models import (
    ContractInstallmentModel,
    ContractModel,
    PlanModel,
)
from src.service.billing import to_cents


class PostgresContractRepository(ContractRepository):
    """
    PostgreSQL-backed contract repository.

    Driver and SQLAlchemy errors are re-raised as DataAccessException.
    Due date corrections are committed one at a time so a failed write
    cannot take earlier corrections down with it.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_all_contracts(self) -> List[Contract]:
        stmt = select(ContractModel).order_by(ContractModel.contract_number)
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessException("get_all_contracts", str(e)) from e

        return [self._to_contract(model) for model in result.scalars().all()]

    async def get_contract(self, contract_id: str) -> Optional[Contract]:
        stmt = select(ContractModel).where(ContractModel.id == contract_id)
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessException("get_contract", str(e)) from e

        model = result.scalar_one_or_none()
        if model is None:
            return None

        return self._to_contract(model)

    async def get_installments(self, contract_id: str) -> List[Installment]:
        stmt = (
            select(ContractInstallmentModel)
            .where(ContractInstallmentModel.contract_id == contract_id)
            .order_by(ContractInstallmentModel.installment_number)
        )
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessException("get_installments", str(e)) from e

        return [self._to_installment(model) for model in result.scalars().all()]

    async def update_installment_due_date(
        self,
        installment_id: str,
        due_date: date,
    ) -> None:
        stmt = (
            update(ContractInstallmentModel)
            .where(ContractInstallmentModel.id == installment_id)
            .values(due_date=due_date, updated_at=datetime.utcnow())
        )
        try:
            result = await self._session.execute(stmt)
            if result.rowcount == 0:
                await self._session.rollback()
                raise DataAccessException(
                    "update_installment_due_date",
                    f"installment {installment_id} does not exist",
                )
            await self._session.commit()
        except (SQLAlchemyError, OSError) as e:
            await self._session.rollback()
            raise DataAccessException("update_installment_due_date", str(e)) from e

    async def get_plan_name(self, plan_id: str) -> Optional[str]:
        stmt = select(PlanModel.name).where(PlanModel.id == plan_id)
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessException("get_plan_name", str(e)) from e

        return result.scalar_one_or_none()

    def _to_contract(self, model: ContractModel) -> Contract:
        return Contract(
            id=str(model.id),
            contract_number=model.contract_number,
            plan_id=str(model.plan_id),
            original_start_date=model.start_date,
            billing_period=BillingCadence(model.billing_period),
            last_paid_date=model.received_date,
            status=ContractStatus(model.status),
            monthly_amount_cents=to_cents(model.monthly_amount),
            annual_amount_cents=(
                to_cents(model.annual_amount) if model.annual_amount is not None else None
            ),
            payment_approved=model.payment_approved,
        )

    def _to_installment(self, model: ContractInstallmentModel) -> Installment:
        return Installment(
            id=str(model.id),
            contract_id=str(model.contract_id),
            installment_number=model.installment_number,
            due_date=model.due_date,
            status=InstallmentStatus(model.status),
            amount_cents=to_cents(model.amount),
            period_start=model.period_start,
            period_end=model.period_end,
            paid_at=model.paid_at,
        )
