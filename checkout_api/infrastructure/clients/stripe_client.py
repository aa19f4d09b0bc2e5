from __future__ import annotations

import logging

import stripe

from checkout_api.application.ports.checkout_gateway_port import CheckoutGatewayPort
from checkout_api.domain.entities.checkout import CheckoutSessionConfig, CheckoutSessionResult
from checkout_api.domain.exceptions import CheckoutProviderError, CheckoutTransportError


logger = logging.getLogger(__name__)


class StripeClient(CheckoutGatewayPort):
    def __init__(self, *, secret_key: str | None):
        # An empty key is left unset so Stripe reports it as an authentication error.
        stripe.api_key = secret_key or None

    def create_checkout_session(self, config: CheckoutSessionConfig) -> CheckoutSessionResult:
        payload = build_session_params(config)
        try:
            session = stripe.checkout.Session.create(**payload)
        except stripe.APIConnectionError as exc:
            logger.warning("stripe_client: connection_error message=%s", exc.user_message or str(exc))
            raise CheckoutTransportError(str(exc)) from exc
        except stripe.StripeError as exc:
            error = _error_body(exc)
            logger.warning(
                "stripe_client: provider_error type=%s code=%s status=%s",
                error.get("type"),
                exc.code or error.get("code"),
                exc.http_status,
            )
            raise CheckoutProviderError(
                str(exc),
                error_type=error.get("type") or type(exc).__name__,
                code=exc.code or error.get("code"),
                details=error.get("message") or exc.user_message,
            ) from exc

        session_id = getattr(session, "id", None)
        session_url = getattr(session, "url", None)
        if not session_id or not session_url:
            raise CheckoutProviderError("Stripe checkout session response is incomplete.")

        return CheckoutSessionResult(id=str(session_id), url=str(session_url))


def build_session_params(config: CheckoutSessionConfig) -> dict:
    payload: dict = {
        "mode": config.mode,
        "line_items": [{"price": item.price, "quantity": item.quantity} for item in config.line_items],
        "success_url": config.success_url,
        "cancel_url": config.cancel_url,
        "client_reference_id": config.client_reference_id,
    }
    if config.promotion_codes:
        payload["discounts"] = [{"promotion_code": code} for code in config.promotion_codes]
    if config.billing_address_required:
        payload["billing_address_collection"] = "required"
    if config.phone_number_collection:
        payload["phone_number_collection"] = {"enabled": True}
    if config.custom_fields:
        payload["custom_fields"] = [
            {
                "key": custom_field.key,
                "label": {"type": "custom", "custom": custom_field.label},
                "type": "text",
                "optional": custom_field.optional,
            }
            for custom_field in config.custom_fields
        ]
    if config.automatic_tax:
        payload["automatic_tax"] = {"enabled": True}
    if config.trial_period_days:
        payload["subscription_data"] = {"trial_period_days": config.trial_period_days}
    return payload


def _error_body(exc: stripe.StripeError) -> dict:
    body = exc.json_body if isinstance(exc.json_body, dict) else {}
    error = body.get("error")
    return error if isinstance(error, dict) else {}
