from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from checkout_api.domain.entities.checkout import CheckoutPreset, Plan, PlanCatalog


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    stripe_price_ids: dict
    stripe_annual_promotion_code: str
    checkout_preset: CheckoutPreset
    checkout_default_origin: str
    checkout_cancel_path: str
    checkout_reference_prefix: str


def get_settings() -> Settings:
    preset = _env("CHECKOUT_PRESET", CheckoutPreset.PROMOTION.value)
    try:
        checkout_preset = CheckoutPreset(preset)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in CheckoutPreset)
        raise ValueError(f"CHECKOUT_PRESET must be one of: {allowed}.") from exc

    return Settings(
        stripe_secret_key=_env("STRIPE_SECRET_KEY", ""),
        stripe_price_ids={
            "monthly": _env("STRIPE_PRICE_ID_MONTHLY", "price_1SI9mtAE1fARVUOGEa05tboF"),
            "annual": _env("STRIPE_PRICE_ID_ANNUAL", "price_1SI9oOAE1fARVUOGj7ov4n22"),
        },
        stripe_annual_promotion_code=_env(
            "STRIPE_ANNUAL_PROMOTION_CODE", "promo_1SI9z2AE1fARVUOGXb5M7TBq"
        ),
        checkout_preset=checkout_preset,
        checkout_default_origin=_env("CHECKOUT_DEFAULT_ORIGIN", "https://resources.onfrontiers.com"),
        checkout_cancel_path=_env("CHECKOUT_CANCEL_PATH", "/govtribe-offer"),
        checkout_reference_prefix=_env("CHECKOUT_REFERENCE_PREFIX", "govtribe"),
    )


def build_plan_catalog(settings: Settings) -> PlanCatalog:
    return PlanCatalog(
        prices={plan: settings.stripe_price_ids.get(plan.value, "") for plan in Plan}
    )
