from __future__ import annotations

import pytest

from checkout_api.domain.entities.checkout import CheckoutPreset, Plan
from checkout_api.domain.exceptions import PlanCatalogError
from checkout_api.shared.config import build_plan_catalog, get_settings


_VARS = [
    "STRIPE_SECRET_KEY",
    "STRIPE_PRICE_ID_MONTHLY",
    "STRIPE_PRICE_ID_ANNUAL",
    "STRIPE_ANNUAL_PROMOTION_CODE",
    "CHECKOUT_PRESET",
    "CHECKOUT_DEFAULT_ORIGIN",
    "CHECKOUT_CANCEL_PATH",
    "CHECKOUT_REFERENCE_PREFIX",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()

    assert settings.checkout_preset is CheckoutPreset.PROMOTION
    assert settings.checkout_default_origin == "https://resources.onfrontiers.com"
    assert settings.checkout_cancel_path == "/govtribe-offer"
    assert settings.checkout_reference_prefix == "govtribe"
    assert settings.stripe_secret_key == ""
    catalog = build_plan_catalog(settings)
    assert catalog.price_for(Plan.MONTHLY) == "price_1SI9mtAE1fARVUOGEa05tboF"
    assert catalog.price_for(Plan.ANNUAL) == "price_1SI9oOAE1fARVUOGj7ov4n22"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CHECKOUT_PRESET", "billing_details")
    monkeypatch.setenv("STRIPE_PRICE_ID_MONTHLY", "price_m")
    monkeypatch.setenv("CHECKOUT_DEFAULT_ORIGIN", "https://shop.example")

    settings = get_settings()

    assert settings.checkout_preset is CheckoutPreset.BILLING_DETAILS
    assert settings.checkout_default_origin == "https://shop.example"
    assert build_plan_catalog(settings).price_for(Plan.MONTHLY) == "price_m"


def test_unknown_preset_is_rejected(monkeypatch):
    monkeypatch.setenv("CHECKOUT_PRESET", "both")

    with pytest.raises(ValueError):
        get_settings()


def test_empty_price_id_fails_catalog_validation(monkeypatch):
    monkeypatch.setenv("STRIPE_PRICE_ID_ANNUAL", "")

    with pytest.raises(PlanCatalogError):
        build_plan_catalog(get_settings())
