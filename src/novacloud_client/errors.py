"""Exception hierarchy for the NovaCloud client."""

from __future__ import annotations

from typing import Any

import requests


class NovaCloudError(Exception):
    """Base error for everything raised by the SDK."""


class ConfigurationError(NovaCloudError, ValueError):
    """A required credential is missing or blank."""


class ValidationError(NovaCloudError, ValueError):
    """Caller-supplied arguments failed an endpoint precondition."""


class HTTPError(NovaCloudError):
    """Non-2xx response. Keeps the full response for diagnostics."""

    def __init__(self, message: str, response: requests.Response | None = None) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None

    @property
    def headers(self) -> dict[str, str]:
        return dict(self.response.headers) if self.response is not None else {}

    @property
    def body(self) -> Any:
        if self.response is None:
            return None
        return self.response.text


class ClientError(HTTPError):
    pass


class BadRequestError(ClientError):
    pass


class AuthenticationError(ClientError):
    pass


class PermissionDeniedError(ClientError):
    pass


class NotAcceptableError(ClientError):
    pass


class RateLimitError(ClientError):
    pass


class ServerError(HTTPError):
    pass


class InternalServerError(ServerError):
    pass


class BadGatewayError(ServerError):
    pass


class ServiceUnavailableError(ServerError):
    pass


class GatewayTimeoutError(ServerError):
    pass
