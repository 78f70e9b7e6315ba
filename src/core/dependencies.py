"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import PostgresContractRepository
from src.application.services import BillingService, ContractBillingService


# Repository dependencies
async def get_contract_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresContractRepository:
    """Get a ContractRepository instance."""
    return PostgresContractRepository(session)


# Service dependencies
def get_billing_service() -> BillingService:
    """Get a stateless BillingService instance."""
    return BillingService()


async def get_contract_billing_service(
    contract_repo: Annotated[PostgresContractRepository, Depends(get_contract_repository)],
) -> ContractBillingService:
    """Get a ContractBillingService bound to a request-scoped repository."""
    return ContractBillingService(contract_repository=contract_repo)
