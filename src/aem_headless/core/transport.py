"""Transport abstraction and the default ``requests`` implementation."""
from __future__ import annotations

import logging
from typing import Any, Dict, Protocol

import requests

logger = logging.getLogger(__name__)

# Keyword arguments forwarded to requests.Session.request as-is.
_REQUESTS_KWARGS = {
    "params",
    "cookies",
    "files",
    "auth",
    "timeout",
    "allow_redirects",
    "proxies",
    "hooks",
    "stream",
    "verify",
    "cert",
}


class Response(Protocol):
    ok: bool
    status: int

    def json(self) -> Any:
        ...


class Transport(Protocol):
    def __call__(self, url: str, request_options: Dict[str, Any]) -> Response:
        ...


class HttpResponse:
    """Fetch-style view of a ``requests.Response``."""

    def __init__(self, response: requests.Response) -> None:
        self.raw = response

    @property
    def ok(self) -> bool:
        return self.raw.ok

    @property
    def status(self) -> int:
        return self.raw.status_code

    def json(self) -> Any:
        return self.raw.json()


class RequestsTransport:
    """Issue one HTTP request per call through a ``requests.Session``.

    ``request_options`` uses fetch-style keys (``method``, ``headers``,
    ``body``, ``credentials``). ``credentials`` only matters to browsers and
    is ignored; known ``requests`` keyword arguments such as ``timeout`` or
    ``verify`` are passed through.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or requests.Session()

    def __call__(self, url: str, request_options: Dict[str, Any]) -> HttpResponse:
        options = dict(request_options)
        method = str(options.pop("method", "POST")).upper()
        headers = options.pop("headers", None)
        body = options.pop("body", None)
        options.pop("credentials", None)

        kwargs = {key: options.pop(key) for key in list(options) if key in _REQUESTS_KWARGS}
        if options:
            logger.debug("Ignoring unsupported request options: %s", sorted(options))

        data = body.encode("utf-8") if isinstance(body, str) else body
        resp = self.session.request(method, url, headers=headers, data=data, **kwargs)
        return HttpResponse(resp)
