from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import requests

from ..case import to_wire
from ..config import Configuration
from .response import raise_for_response
from .signing import RequestSigner

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
QUERY_VERBS = frozenset({"GET", "DELETE"})

RequestHook = Callable[[requests.Request], None]


def decode_body(body: Any) -> Any:
    """Decode a response body, keeping malformed JSON as the raw string."""
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not isinstance(body, str):
        return body
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body


class SignedHttpClient:
    """Signs, dispatches and classifies every request sent to NovaCloud.

    The transport is any object with the ``requests.Session`` interface
    (``prepare_request``/``send``). When none is given a session is built
    once, on first use, under a lock.
    """

    def __init__(
        self,
        config: Configuration,
        session: requests.Session | None = None,
        request_hooks: Iterable[RequestHook] | None = None,
        signer: RequestSigner | None = None,
    ) -> None:
        self.config = config
        self.base_url = config.base_url
        self.signer = signer or RequestSigner(config.app_key, config.app_secret)
        self.request_hooks: list[RequestHook] = list(request_hooks or [])
        self._session = session
        self._owns_session = session is None
        self._session_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            with self._session_lock:
                if self._session is None:
                    self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def build_request(
        self, verb: str, path: str, params: Mapping[str, Any] | None = None
    ) -> requests.Request:
        method = verb.upper()
        request = requests.Request(method, f"{self.base_url}{path}")
        request.headers["Accept"] = "application/json"

        if params:
            if method in QUERY_VERBS:
                request.params = dict(params)
            else:
                request.headers["Content-Type"] = JSON_CONTENT_TYPE
                request.data = json.dumps(params, separators=(",", ":"), ensure_ascii=False).encode(
                    "utf-8"
                )

        request.headers.update(self.signer.headers())
        for hook in self.request_hooks:
            hook(request)
        return request

    def execute(
        self,
        verb: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        camelize: bool = False,
    ) -> Any:
        """Send a signed request and return the decoded body.

        ``camelize=True`` converts snake_case params to wire casing first;
        call sites that already build camelCase payloads leave it off.
        """
        if camelize and params:
            params = to_wire(params)

        request = self.build_request(verb, path, params)
        prepared = self.session.prepare_request(request)
        logger.debug(f"{prepared.method} {path}")

        response = self.session.send(prepared, timeout=self.config.timeout)
        raise_for_response(response)

        body = response.text if response.content is not None else None
        return decode_body(body)

    def get(self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return self.execute("GET", path, params, **kwargs)

    def post(self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return self.execute("POST", path, params, **kwargs)
