"""Data Transfer Objects for application layer."""

from .audit import AuditReport, CorrectionFailure
from .billing import (
    CadenceRequest,
    CadenceResponse,
    RegularizationRequest,
    RegularizationResponse,
    RenewalRequest,
    RenewalResponse,
)
from .contract import PaymentStatusResponse

__all__ = [
    "AuditReport",
    "CorrectionFailure",
    "CadenceRequest",
    "CadenceResponse",
    "RegularizationRequest",
    "RegularizationResponse",
    "RenewalRequest",
    "RenewalResponse",
    "PaymentStatusResponse",
]
