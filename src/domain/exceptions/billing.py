"""Billing-rule domain exceptions."""

from .base import DomainException


class CadenceMismatchException(DomainException):
    """
    Raised when a requested billing cadence disagrees with the one the
    plan mandates.

    Never corrected silently: accepting the wrong cadence means charging
    the wrong amount.
    """

    def __init__(self, plan_name: str, requested_cadence: str, correct_cadence: str):
        super().__init__(
            message=(
                f'Billing cadence mismatch: plan "{plan_name}" is billed '
                f"{correct_cadence}, but {requested_cadence} was requested"
            ),
            code="CADENCE_MISMATCH",
        )
        self.plan_name = plan_name
        self.requested_cadence = requested_cadence
        self.correct_cadence = correct_cadence


class InvalidBillingRequestException(DomainException):
    """Raised when a billing calculation request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_BILLING_REQUEST",
        )
