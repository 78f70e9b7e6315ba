"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import Base, PlanModel, ContractModel, ContractInstallmentModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "PlanModel",
    "ContractModel",
    "ContractInstallmentModel",
]
