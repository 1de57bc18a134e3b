import json
import os
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger

ENVIRONMENT = os.environ.get("ENVIRONMENT", "dev")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

logger = Logger(service=os.environ.get("POWERTOOLS_SERVICE_NAME", "echo-api"), level=LOG_LEVEL)
logger.append_keys(environment=ENVIRONMENT)

MESSAGE = "Hello from Go Lambda!"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
}

# Returned verbatim when the payload cannot be encoded
INTERNAL_ERROR_BODY = '{"error": "Internal server error"}'

# ---- Helpers -----------------------------------------------------------------

def resp(status: int, body: Any, headers: Optional[Dict[str, str]] = None):
    base = {"Content-Type": "application/json"}
    if headers:
        base.update(headers)
    if not isinstance(body, str):
        body = json.dumps(body)
    return {"statusCode": status, "headers": base, "body": body}

def build_payload(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reflect the salient parts of an API Gateway proxy event.
    `body` and `queryParams` are left out entirely when there is nothing to echo.
    """
    payload = {
        "message": MESSAGE,
        "method": event.get("httpMethod") or "",
        "path": event.get("path") or "",
        "headers": event.get("headers") or {},
    }

    body = event.get("body")
    if body:
        payload["body"] = body

    query = event.get("queryStringParameters")
    if query:
        payload["queryParams"] = query

    return payload

# ---- Entrypoint ---------------------------------------------------------------

@logger.inject_lambda_context
def handler(event, context):
    """
    Lambda proxy integration behind API Gateway (ANY / and ANY /{proxy+}).
    Every method and path lands here and gets echoed back.
    """
    logger.info(
        "Received request",
        extra={"method": event.get("httpMethod"), "path": event.get("path"), "event": event},
    )

    payload = build_payload(event)
    try:
        body = json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError):
        logger.exception("Error marshaling response")
        return resp(500, INTERNAL_ERROR_BODY)

    return resp(200, body, CORS_HEADERS)
