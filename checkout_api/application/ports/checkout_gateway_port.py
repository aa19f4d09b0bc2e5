from __future__ import annotations

from typing import Protocol

from checkout_api.domain.entities.checkout import CheckoutSessionConfig, CheckoutSessionResult


class CheckoutGatewayPort(Protocol):
    def create_checkout_session(self, config: CheckoutSessionConfig) -> CheckoutSessionResult:
        ...
