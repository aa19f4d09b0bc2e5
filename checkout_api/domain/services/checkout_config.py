from __future__ import annotations

from checkout_api.domain.entities.checkout import (
    CheckoutPreset,
    CheckoutRequest,
    CheckoutSessionConfig,
    CustomTextField,
    LineItem,
    Plan,
    PlanCatalog,
)


SUBSCRIPTION_MODE = "subscription"
SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"
COMPANY_NAME_FIELD = CustomTextField(key="company_name", label="Company Name", optional=False)


def build_success_url(origin: str) -> str:
    return f"{origin}/success?session_id={SESSION_ID_PLACEHOLDER}"


def build_client_reference(*, prefix: str, plan: Plan, seats: int, created_at_ms: int) -> str:
    # Not unique: identical requests within the same millisecond collide.
    return f"{prefix}_{plan.value}_{seats}_{created_at_ms}"


def build_checkout_session_config(
    request: CheckoutRequest,
    *,
    catalog: PlanCatalog,
    preset: CheckoutPreset,
    origin: str,
    cancel_path: str,
    reference_prefix: str,
    created_at_ms: int,
    annual_promotion_code: str | None = None,
) -> CheckoutSessionConfig:
    base = dict(
        mode=SUBSCRIPTION_MODE,
        line_items=(LineItem(price=catalog.price_for(request.plan), quantity=request.seats),),
        success_url=build_success_url(origin),
        cancel_url=f"{origin}{cancel_path}",
        client_reference_id=build_client_reference(
            prefix=reference_prefix,
            plan=request.plan,
            seats=request.seats,
            created_at_ms=created_at_ms,
        ),
    )

    if preset is CheckoutPreset.PROMOTION:
        promotion_codes: tuple[str, ...] = ()
        if request.plan is Plan.ANNUAL and annual_promotion_code:
            promotion_codes = (annual_promotion_code,)
        return CheckoutSessionConfig(**base, promotion_codes=promotion_codes)

    trial_period_days = request.trial_days if request.trial_days and request.trial_days > 0 else None
    return CheckoutSessionConfig(
        **base,
        billing_address_required=True,
        phone_number_collection=True,
        custom_fields=(COMPANY_NAME_FIELD,),
        automatic_tax=True,
        trial_period_days=trial_period_days,
    )
