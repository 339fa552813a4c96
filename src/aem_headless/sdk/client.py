"""Python client for the AEM headless GraphQL API."""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping
from urllib.parse import quote

from aem_headless.core.config import HeadlessConfig
from aem_headless.core.dispatcher import RequestDispatcher
from aem_headless.core.transport import Transport
from .config import load_config, merge_overrides


def encode_variables(variables: Mapping[str, Any] | None) -> str:
    """Encode persisted query variables as ``;name=value`` path parameters."""
    if not variables:
        return ""
    parts = []
    for key, value in variables.items():
        text = value if isinstance(value, str) else json.dumps(value)
        parts.append(f";{quote(str(key), safe='')}={quote(text, safe='')}")
    return "".join(parts)


class AEMHeadless:
    """Client for persisted and ad-hoc GraphQL queries.

    ``endpoint``, ``host`` and ``auth`` override whatever ``load_config``
    resolves from the config file and environment. ``auth`` is either a
    bearer token or a ``(username, password)`` pair.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        host: str | None = None,
        auth: Any = None,
        *,
        config: HeadlessConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        base_config = config or load_config()
        self.config = merge_overrides(base_config, host=host, endpoint=endpoint, auth=auth)
        self.dispatcher = RequestDispatcher(self.config, transport=transport)

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def host(self) -> str:
        return self.config.host_uri

    # --- public methods ---
    def run_query(
        self,
        query: str | None,
        options: Dict[str, Any] | None = None,
        auth: Any = None,
        variables: Dict[str, Any] | None = None,
        endpoint: str | None = None,
    ) -> Any:
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        return self.dispatcher.dispatch(endpoint or self.endpoint, json.dumps(payload), options or {}, auth)

    def persist_query(
        self,
        query: str,
        path: str,
        options: Dict[str, Any] | None = None,
        auth: Any = None,
    ) -> Any:
        url = f"{self.config.actions.persist}/{path.lstrip('/')}"
        return self.dispatcher.dispatch(url, query, {"method": "PUT", **(options or {})}, auth)

    def run_persisted_query(
        self,
        path: str,
        variables: Dict[str, Any] | None = None,
        options: Dict[str, Any] | None = None,
        auth: Any = None,
    ) -> Any:
        url = f"{self.config.actions.execute}/{path.lstrip('/')}{encode_variables(variables)}"
        return self.dispatcher.dispatch(url, "", {"method": "GET", **(options or {})}, auth)

    def list_persisted_queries(self, options: Dict[str, Any] | None = None, auth: Any = None) -> Any:
        return self.dispatcher.dispatch(self.config.actions.list, "", {"method": "GET", **(options or {})}, auth)

    # Earlier functional API: same names and positional order.
    def post_query(
        self,
        query: str | None,
        endpoint: str | None = None,
        options: Dict[str, Any] | None = None,
        auth: Any = None,
    ) -> Any:
        return self.run_query(query, options, auth, endpoint=endpoint)

    def save_query(
        self,
        query: str,
        endpoint: str,
        options: Dict[str, Any] | None = None,
        auth: Any = None,
    ) -> Any:
        return self.persist_query(query, endpoint, options, auth)

    def get_query(self, endpoint: str, options: Dict[str, Any] | None = None, auth: Any = None) -> Any:
        return self.run_persisted_query(endpoint, None, options, auth)

    def list_queries(self, options: Dict[str, Any] | None = None, auth: Any = None) -> Any:
        return self.list_persisted_queries(options, auth)
