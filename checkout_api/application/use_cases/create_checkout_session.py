from __future__ import annotations

import logging
import time
from collections.abc import Callable

from checkout_api.application.dto.checkout import (
    CreateCheckoutSessionInput,
    CreateCheckoutSessionOutput,
)
from checkout_api.application.ports.checkout_gateway_port import CheckoutGatewayPort
from checkout_api.domain.entities.checkout import CheckoutPreset, PlanCatalog
from checkout_api.domain.services.checkout_config import build_checkout_session_config
from checkout_api.domain.services.checkout_request import parse_checkout_request


logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class CreateCheckoutSessionUseCase:
    def __init__(
        self,
        *,
        gateway: CheckoutGatewayPort,
        catalog: PlanCatalog,
        preset: CheckoutPreset,
        default_origin: str,
        cancel_path: str,
        reference_prefix: str,
        annual_promotion_code: str | None = None,
        clock: Callable[[], int] = now_ms,
    ):
        self._gateway = gateway
        self._catalog = catalog
        self._preset = preset
        self._default_origin = default_origin
        self._cancel_path = cancel_path
        self._reference_prefix = reference_prefix
        self._annual_promotion_code = annual_promotion_code
        self._clock = clock

    def execute(self, command: CreateCheckoutSessionInput) -> CreateCheckoutSessionOutput:
        request = parse_checkout_request(command.payload)
        origin = command.origin or self._default_origin

        config = build_checkout_session_config(
            request,
            catalog=self._catalog,
            preset=self._preset,
            origin=origin,
            cancel_path=self._cancel_path,
            reference_prefix=self._reference_prefix,
            created_at_ms=self._clock(),
            annual_promotion_code=self._annual_promotion_code,
        )

        result = self._gateway.create_checkout_session(config)
        logger.info(
            "create_checkout_session: created plan=%s seats=%s preset=%s session_id=%s",
            request.plan.value,
            request.seats,
            self._preset.value,
            result.id,
        )
        return CreateCheckoutSessionOutput(
            session_id=result.id,
            url=result.url,
            client_reference_id=config.client_reference_id,
        )
