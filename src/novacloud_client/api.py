from __future__ import annotations

import functools
from collections.abc import Iterable, Mapping
from typing import Any

import requests

from .client.http import RequestHook, SignedHttpClient
from .config import DEFAULT_TIMEOUT, Configuration
from .resources import Control, Logs, Players, ScheduledControl, Screens, Solutions


class Client:
    """Entry point for the NovaCloud API.

    Example::

        with Client(app_key="...", app_secret="...", service_domain="open-us.vnnox.com") as nova:
            for player in nova.players.list(count=50):
                print(player.name, player.online)
    """

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        service_domain: str,
        *,
        session: requests.Session | None = None,
        request_hooks: Iterable[RequestHook] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.config = Configuration(
            app_key=app_key,
            app_secret=app_secret,
            service_domain=service_domain,
            timeout=timeout,
        )
        self.http = SignedHttpClient(self.config, session=session, request_hooks=request_hooks)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        config = Configuration.from_env()
        return cls(
            config.app_key,
            config.app_secret,
            config.service_domain,
            timeout=config.timeout,
            **kwargs,
        )

    def request(self, http_method: str, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send a raw signed request; ``params`` must already be in wire casing."""
        return self.http.execute(http_method, endpoint, params)

    @functools.cached_property
    def players(self) -> Players:
        return Players(self.http)

    @functools.cached_property
    def control(self) -> Control:
        return Control(self.http)

    @functools.cached_property
    def scheduled_control(self) -> ScheduledControl:
        return ScheduledControl(self.http)

    @functools.cached_property
    def screens(self) -> Screens:
        return Screens(self.http)

    @functools.cached_property
    def logs(self) -> Logs:
        return Logs(self.http)

    @functools.cached_property
    def solutions(self) -> Solutions:
        return Solutions(self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
