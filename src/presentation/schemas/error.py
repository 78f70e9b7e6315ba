"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["CADENCE_MISMATCH"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=['Billing cadence mismatch: plan "Comfort Plus" is billed annual, but monthly was requested'],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "CONTRACT_NOT_FOUND",
                    "message": "Contract not found: 550e8400-e29b-41d4-a716-446655440000",
                    "request_id": "abc123",
                }
            ]
        }
    }
