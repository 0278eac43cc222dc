from .http import SignedHttpClient, decode_body
from .response import classify, raise_for_response
from .signing import RequestSigner, compute_checksum, generate_nonce

__all__ = [
    "RequestSigner",
    "SignedHttpClient",
    "classify",
    "compute_checksum",
    "decode_body",
    "generate_nonce",
    "raise_for_response",
]
