"""Type definitions for the NovaCloud client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SignedRequestContext:
    timestamp: str  # UTC epoch seconds, decimal string
    nonce: str  # 16 alphanumeric characters
    checksum: str  # sha256 hex of secret + nonce + timestamp
