import json
from decimal import Decimal

from .errors import InvalidRequest, PatientNotFound, StoreError
from .log import get_logger

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

NOT_FOUND = "Patient not found"


def decimal_default(obj):
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def respond(status, payload=None, headers=None):
    """Build an API Gateway proxy response; no payload means an empty body."""
    return {
        "statusCode": status,
        "headers": {**CORS_HEADERS, **(headers or {})},
        "body": "" if payload is None else json.dumps(payload, default=decimal_default),
    }


def error_response(status, error, message):
    return respond(status, {"error": error, "message": message})


def from_exception(exc):
    """Map any failure raised by an operation onto an error response."""
    if isinstance(exc, PatientNotFound):
        logger.warning("%s", exc)
        return error_response(404, NOT_FOUND, str(exc))
    if isinstance(exc, InvalidRequest):
        logger.warning("Invalid request: %s", exc)
        return error_response(500, exc.error, str(exc))
    if isinstance(exc, StoreError):
        log = logger.exception if exc.status_code >= 500 else logger.warning
        log("Store error %s (%s): %s", exc.name, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.name, exc.message)

    logger.exception("Unhandled error")
    return error_response(500, type(exc).__name__ or "Exception", str(exc) or "Unknown error")
