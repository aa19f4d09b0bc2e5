from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CreateCheckoutSessionInput:
    payload: Mapping[str, Any]
    origin: str | None


@dataclass(frozen=True)
class CreateCheckoutSessionOutput:
    session_id: str
    url: str
    client_reference_id: str
