"""send-onboarding-email function handler.

Receives the onboarding payload after the record has been stored and sends
the client confirmation and team alert emails.
"""

import base64
import json
from typing import Any

import structlog

from rabt.models.onboarding import OnboardingEmailRequest
from rabt.services.onboarding_emails import OnboardingMailer

logger = structlog.get_logger()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _response(status_code: int, body: dict | None) -> dict:
    headers = dict(CORS_HEADERS)
    if body is not None:
        headers["Content-Type"] = "application/json"
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(body, ensure_ascii=False) if body is not None else "",
    }


def _http_method(event: dict) -> str:
    """HTTP method for both API Gateway (v1) and function URL (v2) events."""
    method = event.get("httpMethod")
    if not method:
        method = event.get("requestContext", {}).get("http", {}).get("method", "")
    return method.upper()


def _read_body(event: dict) -> dict:
    raw = event.get("body") or "{}"
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    return json.loads(raw)


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle onboarding notification requests.

    OPTIONS returns the CORS preflight response. Any other method is treated
    as a notification: 200 with ``{"success": true, "message": ...}`` or 500
    with ``{"error": message}``.
    """
    if _http_method(event) == "OPTIONS":
        return _response(200, None)

    try:
        request = OnboardingEmailRequest.model_validate(_read_body(event))

        logger.info(
            "Onboarding data received",
            company=request.company,
            contact_name=request.contact_name,
            email=request.email,
            services=request.services,
            budget=request.budget,
            timeline=request.timeline,
        )

        sent = OnboardingMailer().send(request)

        logger.info(
            "Onboarding emails processed",
            submission_id=request.submission_id,
            sent_count=len(sent),
        )

        return _response(200, {
            "success": True,
            "message": "Onboarding data received successfully",
        })

    except Exception as e:
        logger.exception("Error in send-onboarding-email function", error=str(e))
        return _response(500, {"error": getattr(e, "message", None) or str(e)})
