"""Tests for request signing headers."""

import hashlib
import re
from unittest.mock import patch

from novacloud_client.client.signing import RequestSigner, compute_checksum, generate_nonce

ALNUM_16 = re.compile(r"\A[0-9A-Za-z]{16}\Z")


def test_nonce_is_16_alphanumeric_characters():
    for _ in range(200):
        assert ALNUM_16.match(generate_nonce())


def test_nonce_is_unpredictable():
    nonces = {generate_nonce(lambda: 1672531200.0) for _ in range(50)}

    assert len(nonces) > 1


def test_checksum_formula():
    expected = hashlib.sha256(b"app_secretnoncevalue1672531200").hexdigest()

    assert compute_checksum("app_secret", "noncevalue", "1672531200") == expected


def test_checksum_changes_with_each_input():
    base = compute_checksum("secret", "NONCE12345678901", "1672531200")

    assert compute_checksum("secreT", "NONCE12345678901", "1672531200") != base
    assert compute_checksum("secret", "NONCE12345678902", "1672531200") != base
    assert compute_checksum("secret", "NONCE12345678901", "1672531201") != base


def test_headers_use_clock_and_nonce():
    signer = RequestSigner(
        "app_key",
        "app_secret",
        clock=lambda: 1672531200.9,
        nonce_factory=lambda: "NONCE1234567890",
    )

    headers = signer.headers()

    assert headers == {
        "AppKey": "app_key",
        "Nonce": "NONCE1234567890",
        "CurTime": "1672531200",
        "CheckSum": hashlib.sha256(b"app_secretNONCE12345678901672531200").hexdigest(),
    }


def test_default_clock_reads_time_module():
    signer = RequestSigner("k", "s")

    with patch("novacloud_client.client.signing.time.time", return_value=1700000000.5):
        context = signer.sign()

    assert context.timestamp == "1700000000"
    assert ALNUM_16.match(context.nonce)
    assert context.checksum == compute_checksum("s", context.nonce, "1700000000")


def test_each_sign_call_builds_fresh_context():
    signer = RequestSigner("k", "s", clock=lambda: 1672531200)

    assert signer.sign().nonce != signer.sign().nonce
