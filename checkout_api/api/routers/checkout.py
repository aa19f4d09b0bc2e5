from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from checkout_api.api.deps import get_checkout_request_handler
from checkout_api.api.handler import CheckoutRequestHandler


router = APIRouter()

# Method gating belongs to the handler, so the route accepts every method.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/create-checkout", methods=ALL_METHODS)
@router.api_route("/.netlify/functions/create-checkout", methods=ALL_METHODS)
async def create_checkout(
    request: Request,
    handler: CheckoutRequestHandler = Depends(get_checkout_request_handler),
):
    body = await request.body()
    result = await run_in_threadpool(
        handler.handle,
        method=request.method,
        headers=dict(request.headers),
        body=body,
    )
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type="application/json" if result.body else None,
    )
