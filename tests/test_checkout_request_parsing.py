from __future__ import annotations

import pytest

from checkout_api.domain.entities.checkout import Plan
from checkout_api.domain.exceptions import InvalidPlanError, InvalidSeatsError
from checkout_api.domain.services.checkout_request import coerce_int, parse_checkout_request


@pytest.mark.parametrize("plan", [None, "", "weekly", "Monthly", 1, ["monthly"]])
def test_invalid_plan_is_rejected_even_when_seats_are_invalid(plan):
    with pytest.raises(InvalidPlanError) as exc_info:
        parse_checkout_request({"plan": plan, "seats": "nope"})

    assert exc_info.value.message == 'Invalid plan. Must be "monthly" or "annual"'


def test_missing_plan_is_rejected():
    with pytest.raises(InvalidPlanError):
        parse_checkout_request({"seats": 3})


@pytest.mark.parametrize("seats", [0, -1, 100, "abc", None, True, [], {}, float("nan"), "0.5"])
def test_out_of_range_or_non_numeric_seats_are_rejected(seats):
    with pytest.raises(InvalidSeatsError) as exc_info:
        parse_checkout_request({"plan": "monthly", "seats": seats})

    assert exc_info.value.message == "Invalid seats. Must be between 1 and 99"


def test_missing_seats_are_rejected():
    with pytest.raises(InvalidSeatsError):
        parse_checkout_request({"plan": "annual"})


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(3, 3), ("3", 3), (4.7, 4), ("4.7", 4), (" 7", 7), ("12abc", 12), (1, 1), (99, 99)],
)
def test_seats_use_leading_integer_coercion(raw, expected):
    request = parse_checkout_request({"plan": "monthly", "seats": raw})

    assert request.seats == expected
    assert request.plan is Plan.MONTHLY


def test_coerce_int_rejects_booleans_and_infinity():
    assert coerce_int(True) is None
    assert coerce_int(float("inf")) is None
    assert coerce_int("-5") == -5


@pytest.mark.parametrize(("raw", "expected"), [(14, 14), ("30", 30), (0, None), (-3, None), ("x", None), (None, None)])
def test_trial_days_only_kept_when_positive(raw, expected):
    request = parse_checkout_request({"plan": "annual", "seats": 2, "trialDays": raw})

    assert request.trial_days == expected


def test_promo_code_is_accepted_and_ignored():
    request = parse_checkout_request({"plan": "annual", "seats": 2, "promoCode": "SAVE"})

    assert request.plan is Plan.ANNUAL
    assert request.seats == 2


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0x10", 16), ("0X0a", 10), ("-0x10", -16), ("0x", None), ("0xg", None), ("٣", None), ("1٣", 1)],
)
def test_coerce_int_string_edge_cases(raw, expected):
    assert coerce_int(raw) == expected


def test_non_ascii_digits_are_not_seats():
    with pytest.raises(InvalidSeatsError):
        parse_checkout_request({"plan": "monthly", "seats": "٣"})


def test_hex_seats_are_read_as_hexadecimal():
    assert parse_checkout_request({"plan": "monthly", "seats": "0x0c"}).seats == 12
