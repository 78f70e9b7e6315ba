"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all billing domain errors.

    Every domain exception carries a human-readable message and a
    stable machine-readable code that the API surfaces as-is.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
