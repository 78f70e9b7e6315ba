"""Application services (use cases)."""

from .billing_service import BillingService
from .contract_billing_service import ContractBillingService
from .installment_audit_service import InstallmentAuditService

__all__ = [
    "BillingService",
    "ContractBillingService",
    "InstallmentAuditService",
]
