"""Input extraction from API Gateway proxy events."""

import json

from pydantic import ValidationError

from .errors import InvalidRequest
from .models import ListQuery, PatientInput


def _invalid(err):
    message = "; ".join(
        f"{'.'.join(str(p) for p in e['loc']) or 'body'}: {e['msg']}" for e in err.errors()
    )
    return InvalidRequest(message, error="ValidationError")


def json_body(event):
    body = event.get("body")
    if body and isinstance(body, str):
        return json.loads(body)
    return body or {}


def patient_input(event):
    try:
        return PatientInput.model_validate(json_body(event))
    except ValidationError as err:
        raise _invalid(err) from err


def list_query(event):
    params = event.get("queryStringParameters") or {}
    try:
        return ListQuery.model_validate(params)
    except ValidationError as err:
        raise _invalid(err) from err


def patient_id(event):
    pid = (event.get("pathParameters") or {}).get("patient_id")
    if not pid:
        raise InvalidRequest("patient_id path parameter is required")
    return pid
