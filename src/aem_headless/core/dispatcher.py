"""Request dispatch: options, auth headers, URL resolution."""
from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .config import Credential, HeadlessConfig
from .errors import NetworkFailure, SDKError
from .normalizer import normalize_transport_failure, read_response
from .transport import RequestsTransport, Transport
from .utils.logging import redact_url

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "POST"


def auth_header(auth: Optional[Credential]) -> Dict[str, str]:
    """Return the Authorization header for ``auth``; empty when there is none."""
    if not auth:
        return {}
    if isinstance(auth, str):
        return {"Authorization": f"Bearer {auth}"}
    username, password = auth
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def build_request_options(
    body: str,
    options: Mapping[str, Any] | None = None,
    auth: Optional[Credential] = None,
) -> Dict[str, Any]:
    """Compute transport options. Caller ``options`` override every computed value."""
    options = dict(options or {})
    request_options: Dict[str, Any] = {"method": options.get("method", DEFAULT_METHOD)}
    if body:
        request_options["body"] = body

    headers = {"Content-Type": "application/json"}
    if auth:
        headers.update(auth_header(auth))
        request_options["credentials"] = "include"
    request_options["headers"] = headers

    request_options.update(options)
    return request_options


def resolve_url(endpoint: str, host: str) -> str:
    """Keep absolute URLs; prefix ``host`` onto anything else."""
    try:
        parsed = urlparse(endpoint)
    except ValueError:
        parsed = None
    if parsed is not None and parsed.scheme and parsed.hostname:
        return endpoint

    if host and not host.endswith("/") and not endpoint.startswith("/"):
        return f"{host}/{endpoint}"
    return f"{host}{endpoint}"


class RequestDispatcher:
    def __init__(self, config: HeadlessConfig, transport: Transport | None = None) -> None:
        self.config = config
        self.transport = transport or RequestsTransport()

    @property
    def host(self) -> str:
        return "" if self.config.browser_like else self.config.host_uri

    def dispatch(
        self,
        endpoint: str,
        body: str = "",
        options: Mapping[str, Any] | None = None,
        auth: Optional[Credential] = None,
    ) -> Any:
        """Send one request and return the parsed JSON response.

        ``auth=None`` falls back to the configured credential; pass an empty
        string to send the request without one. Any failure is raised as an
        ``SDKError``.
        """
        credential = self.config.auth if auth is None else auth
        request_options = build_request_options(body, options, credential)
        url = resolve_url(endpoint, self.host)
        logger.debug("%s %s", request_options.get("method"), redact_url(url))

        try:
            response = self.transport(url, request_options)
        except Exception as exc:
            error = normalize_transport_failure(exc)
            logger.debug("Request to %s failed: %r", redact_url(url), error)
            if error is exc:
                raise
            raise error from exc

        try:
            return read_response(response)
        except SDKError as exc:
            logger.debug("Request to %s failed: %r", redact_url(url), exc)
            raise
        except Exception as exc:
            # Body read failed mid-stream; no usable response remains.
            error = NetworkFailure.from_exception(exc, status="")
            logger.debug("Reading response from %s failed: %r", redact_url(url), error)
            raise error from exc
