from __future__ import annotations

import base64
import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from checkout_api.api.schemas.checkout import (
    CheckoutFailureResponse,
    CheckoutSessionResponse,
    ErrorResponse,
)
from checkout_api.application.dto.checkout import CreateCheckoutSessionInput
from checkout_api.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from checkout_api.domain.exceptions import (
    CheckoutGatewayError,
    CheckoutProviderError,
    CheckoutValidationError,
    MalformedRequestBodyError,
)


logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: str
    headers: dict = field(default_factory=lambda: dict(CORS_HEADERS))


def header_value(headers: Mapping[str, str] | None, name: str) -> str | None:
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_json_body(body: str | bytes | None, *, is_base64_encoded: bool = False) -> dict[str, Any]:
    if body is None:
        raise MalformedRequestBodyError("Request body is empty.")
    try:
        if is_base64_encoded:
            body = base64.b64decode(body, validate=True)
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        # NaN and Infinity are not JSON
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedRequestBodyError(str(exc)) from exc
    if not isinstance(payload, dict):
        raise MalformedRequestBodyError("Request body must be a JSON object.")
    return payload


def _json_response(status_code: int, model: BaseModel) -> HandlerResponse:
    return HandlerResponse(status_code=status_code, body=json.dumps(model.model_dump(exclude_none=True)))


class CheckoutRequestHandler:
    """Runs one checkout request through CORS, method gating, validation and delegation.

    Every response carries the CORS headers. Validation failures map to 400,
    anything raised past validation maps to 500 with whatever diagnostic
    detail the error exposes. The use case is resolved only for POST, so a
    bad configuration surfaces as a 500 and never breaks preflight.
    """

    def __init__(self, *, use_case_provider: Callable[[], CreateCheckoutSessionUseCase]):
        self._use_case_provider = use_case_provider

    def handle(
        self,
        *,
        method: str,
        headers: Mapping[str, str] | None,
        body: str | bytes | None,
        is_base64_encoded: bool = False,
    ) -> HandlerResponse:
        if method == "OPTIONS":
            return HandlerResponse(status_code=200, body="")
        if method != "POST":
            return _json_response(405, ErrorResponse(error="Method not allowed"))

        try:
            payload = parse_json_body(body, is_base64_encoded=is_base64_encoded)
            use_case = self._use_case_provider()
            output = use_case.execute(
                CreateCheckoutSessionInput(payload=payload, origin=header_value(headers, "origin"))
            )
        except CheckoutValidationError as exc:
            logger.info("checkout_handler: rejected reason=%s", exc.message)
            return _json_response(400, ErrorResponse(error=exc.message))
        except CheckoutProviderError as exc:
            return _json_response(
                500,
                CheckoutFailureResponse(
                    message=exc.message,
                    type=exc.error_type,
                    code=exc.code,
                    details=exc.details,
                ),
            )
        except CheckoutGatewayError as exc:
            return _json_response(500, CheckoutFailureResponse(message=exc.message))
        except Exception as exc:  # noqa: BLE001
            logger.exception("checkout_handler: unexpected_failure")
            return _json_response(500, CheckoutFailureResponse(message=str(exc)))

        return _json_response(200, CheckoutSessionResponse(url=output.url, sessionId=output.session_id))
