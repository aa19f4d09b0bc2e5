from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from checkout_api.domain.exceptions import PlanCatalogError


class Plan(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"


class CheckoutPreset(str, Enum):
    """Mutually exclusive checkout policies.

    PROMOTION attaches a promotion code to annual purchases. BILLING_DETAILS
    collects billing address, phone and company name, enables automatic tax
    and honours trial days, relying on the price itself for any discount.
    """

    PROMOTION = "promotion"
    BILLING_DETAILS = "billing_details"


@dataclass(frozen=True)
class CheckoutRequest:
    plan: Plan
    seats: int
    trial_days: int | None = None


@dataclass(frozen=True)
class PlanCatalog:
    prices: Mapping[Plan, str]

    def __post_init__(self) -> None:
        missing = [plan.value for plan in Plan if not self.prices.get(plan)]
        if missing:
            raise PlanCatalogError(f"Missing price id for plan(s): {', '.join(missing)}.")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def price_for(self, plan: Plan) -> str:
        return self.prices[plan]


@dataclass(frozen=True)
class LineItem:
    price: str
    quantity: int


@dataclass(frozen=True)
class CustomTextField:
    key: str
    label: str
    optional: bool = False


@dataclass(frozen=True)
class CheckoutSessionConfig:
    mode: str
    line_items: tuple[LineItem, ...]
    success_url: str
    cancel_url: str
    client_reference_id: str
    promotion_codes: tuple[str, ...] = ()
    billing_address_required: bool = False
    phone_number_collection: bool = False
    custom_fields: tuple[CustomTextField, ...] = ()
    automatic_tax: bool = False
    trial_period_days: int | None = None


@dataclass(frozen=True)
class CheckoutSessionResult:
    id: str
    url: str
