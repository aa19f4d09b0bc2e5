from __future__ import annotations

from pydantic import BaseModel


class CheckoutSessionResponse(BaseModel):
    url: str
    sessionId: str


class ErrorResponse(BaseModel):
    error: str


class CheckoutFailureResponse(BaseModel):
    error: str = "Failed to create checkout session"
    message: str
    type: str | None = None
    code: str | None = None
    details: str | None = None
