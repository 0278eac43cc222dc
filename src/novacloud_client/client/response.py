from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .. import errors

logger = logging.getLogger(__name__)

SUMMARY_LIMIT = 200

ERROR_MAP: dict[int, type[errors.HTTPError]] = {
    400: errors.BadRequestError,
    401: errors.AuthenticationError,
    403: errors.PermissionDeniedError,
    406: errors.NotAcceptableError,
    429: errors.RateLimitError,
    500: errors.InternalServerError,
    502: errors.BadGatewayError,
    503: errors.ServiceUnavailableError,
    504: errors.GatewayTimeoutError,
}


def error_class_for(status: int) -> type[errors.HTTPError] | None:
    """Map a status code to an error class, or None for 2xx."""
    if 200 <= status <= 299:
        return None
    if status in ERROR_MAP:
        return ERROR_MAP[status]
    if 400 <= status <= 499:
        return errors.ClientError
    return errors.ServerError


def summarize_body(body: Any) -> str:
    if body is None:
        return "No response body"
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        stripped = body.strip()
        return stripped[:SUMMARY_LIMIT] if stripped else "Empty body"
    try:
        return json.dumps(body)[:SUMMARY_LIMIT]
    except (TypeError, ValueError):
        return str(body)[:SUMMARY_LIMIT]


def classify(status: int, body: Any, response: requests.Response | None = None) -> None:
    """Raise the mapped HTTPError for a non-2xx status, otherwise return None."""
    error_class = error_class_for(status)
    if error_class is None:
        return
    message = f"HTTP {status}: {summarize_body(body)}"
    logger.warning(message)
    raise error_class(message, response=response)


def raise_for_response(response: requests.Response) -> None:
    body = response.text if response.content is not None else None
    classify(response.status_code, body, response)
