# Re-export from local modules
from .api import Client
from .case import from_wire, to_wire
from .config import Configuration
from .errors import (
    AuthenticationError,
    BadGatewayError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    GatewayTimeoutError,
    HTTPError,
    InternalServerError,
    NotAcceptableError,
    NovaCloudError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "BadGatewayError",
    "BadRequestError",
    "Client",
    "ClientError",
    "Configuration",
    "ConfigurationError",
    "GatewayTimeoutError",
    "HTTPError",
    "InternalServerError",
    "NotAcceptableError",
    "NovaCloudError",
    "PermissionDeniedError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "ValidationError",
    "from_wire",
    "to_wire",
]
