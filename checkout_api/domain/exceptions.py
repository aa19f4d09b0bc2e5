from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class PlanCatalogError(DomainError):
    """Plan catalog is missing a price for some plan."""


class CheckoutValidationError(DomainError):
    """Client input rejected; the message is returned to the caller as is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPlanError(CheckoutValidationError):
    def __init__(self):
        super().__init__('Invalid plan. Must be "monthly" or "annual"')


class InvalidSeatsError(CheckoutValidationError):
    def __init__(self):
        super().__init__("Invalid seats. Must be between 1 and 99")


class MalformedRequestBodyError(DomainError):
    """Request body is not a JSON object."""


class CheckoutGatewayError(DomainError):
    """Checkout session could not be created by the payment provider."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CheckoutProviderError(CheckoutGatewayError):
    """Payment provider answered with an error."""

    def __init__(
        self,
        message: str,
        *,
        error_type: str | None = None,
        code: str | None = None,
        details: str | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.code = code
        self.details = details


class CheckoutTransportError(CheckoutGatewayError):
    """Payment provider could not be reached."""
