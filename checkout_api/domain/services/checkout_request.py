from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from checkout_api.domain.entities.checkout import CheckoutRequest, Plan
from checkout_api.domain.exceptions import InvalidPlanError, InvalidSeatsError


MIN_SEATS = 1
MAX_SEATS = 99

# ASCII digits only; a 0x prefix switches to hexadecimal and needs at least one hex digit
_LEADING_INT_RE = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def coerce_int(value: Any) -> int | None:
    """Leading-integer coercion: ``4.7`` -> 4, ``"12abc"`` -> 12, ``"0x10"`` -> 16, ``"abc"`` -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return math.trunc(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match is None:
            return None
        sign, hex_digits, digits = match.groups()
        if hex_digits is not None:
            if not hex_digits:
                return None
            magnitude = int(hex_digits, 16)
        else:
            magnitude = int(digits)
        return -magnitude if sign == "-" else magnitude
    return None


def parse_plan(value: Any) -> Plan:
    if not isinstance(value, str):
        raise InvalidPlanError()
    try:
        return Plan(value)
    except ValueError as exc:
        raise InvalidPlanError() from exc


def parse_seats(value: Any) -> int:
    seats = coerce_int(value)
    if seats is None or seats < MIN_SEATS or seats > MAX_SEATS:
        raise InvalidSeatsError()
    return seats


def parse_trial_days(value: Any) -> int | None:
    trial_days = coerce_int(value)
    if trial_days is None or trial_days <= 0:
        return None
    return trial_days


def parse_checkout_request(payload: Mapping[str, Any]) -> CheckoutRequest:
    # plan is checked before seats so an invalid plan always wins
    plan = parse_plan(payload.get("plan"))
    seats = parse_seats(payload.get("seats"))
    return CheckoutRequest(
        plan=plan,
        seats=seats,
        trial_days=parse_trial_days(payload.get("trialDays")),
    )
