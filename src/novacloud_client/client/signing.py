from __future__ import annotations

import hashlib
import secrets
import string
import time
from collections.abc import Callable

from ..types import SignedRequestContext

NONCE_LENGTH = 16
_ALPHANUMERIC = string.digits + string.ascii_letters
_BASE36 = string.digits + string.ascii_lowercase


def _sha256_hex(data: bytes) -> str:
    h = hashlib.sha256()
    h.update(data)
    return h.hexdigest()


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_nonce(clock: Callable[[], float] | None = None) -> str:
    """Return a 16-character alphanumeric nonce.

    Time prefix in base-36 microseconds, padded with characters from
    secrets.choice and cut to NONCE_LENGTH.
    """
    now = clock() if clock else time.time()
    timestamp_component = _base36(int(now * 1_000_000))
    random_component = "".join(secrets.choice(_ALPHANUMERIC) for _ in range(NONCE_LENGTH))
    return (timestamp_component + random_component)[:NONCE_LENGTH]


def compute_checksum(app_secret: str, nonce: str, cur_time: str) -> str:
    """SHA-256 hex digest of app_secret + nonce + cur_time."""
    return _sha256_hex(f"{app_secret}{nonce}{cur_time}".encode())


class RequestSigner:
    """Builds the AppKey/Nonce/CurTime/CheckSum header set for each request."""

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        clock: Callable[[], float] | None = None,
        nonce_factory: Callable[[], str] | None = None,
    ) -> None:
        self.app_key = app_key
        self._app_secret = app_secret
        self._clock = clock
        self._nonce_factory = nonce_factory or (lambda: generate_nonce(self._clock))

    def sign(self) -> SignedRequestContext:
        now = self._clock() if self._clock else time.time()
        cur_time = str(int(now))
        nonce = self._nonce_factory()
        return SignedRequestContext(
            timestamp=cur_time,
            nonce=nonce,
            checksum=compute_checksum(self._app_secret, nonce, cur_time),
        )

    def headers(self, context: SignedRequestContext | None = None) -> dict[str, str]:
        context = context or self.sign()
        return {
            "AppKey": self.app_key,
            "Nonce": context.nonce,
            "CurTime": context.timestamp,
            "CheckSum": context.checksum,
        }
