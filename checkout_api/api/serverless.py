"""Serverless function entry point.

Accepts the event shape used by Netlify Functions and API Gateway proxy
integrations (``httpMethod``, ``headers``, ``body``, ``isBase64Encoded``)
and returns ``statusCode``, ``headers`` and ``body``.
"""
from __future__ import annotations

from checkout_api.api.deps import get_checkout_request_handler


def handler(event, context):
    _ = context
    result = get_checkout_request_handler().handle(
        method=event.get("httpMethod", ""),
        headers=event.get("headers") or {},
        body=event.get("body"),
        is_base64_encoded=bool(event.get("isBase64Encoded")),
    )
    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": result.body,
    }
