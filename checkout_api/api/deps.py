from __future__ import annotations

from functools import lru_cache

from checkout_api.api.handler import CheckoutRequestHandler
from checkout_api.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from checkout_api.infrastructure.clients.stripe_client import StripeClient
from checkout_api.shared.config import build_plan_catalog, get_settings


@lru_cache(maxsize=1)
def _get_stripe_client() -> StripeClient:
    settings = get_settings()
    return StripeClient(secret_key=settings.stripe_secret_key)


@lru_cache(maxsize=1)
def get_create_checkout_session_use_case() -> CreateCheckoutSessionUseCase:
    settings = get_settings()
    return CreateCheckoutSessionUseCase(
        gateway=_get_stripe_client(),
        catalog=build_plan_catalog(settings),
        preset=settings.checkout_preset,
        default_origin=settings.checkout_default_origin,
        cancel_path=settings.checkout_cancel_path,
        reference_prefix=settings.checkout_reference_prefix,
        annual_promotion_code=settings.stripe_annual_promotion_code,
    )


def get_checkout_request_handler() -> CheckoutRequestHandler:
    return CheckoutRequestHandler(use_case_provider=get_create_checkout_session_use_case)
