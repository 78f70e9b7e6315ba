"""Pydantic schemas for API request/response validation."""

from .billing import (
    CadenceRequestSchema,
    CadenceResponseSchema,
    RenewalRequestSchema,
    RenewalResponseSchema,
    RegularizationRequestSchema,
    RegularizationResponseSchema,
)
from .contract import PaymentStatusResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "CadenceRequestSchema",
    "CadenceResponseSchema",
    "RenewalRequestSchema",
    "RenewalResponseSchema",
    "RegularizationRequestSchema",
    "RegularizationResponseSchema",
    "PaymentStatusResponseSchema",
    "ErrorResponseSchema",
]
