"""Core defaults (no environment reads)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

DEFAULT_HOST_URI = "http://localhost:4502"
DEFAULT_GRAPHQL_ENDPOINT = "/content/graphql/global/endpoint.json"

# Bearer token or (username, password)
Credential = Union[str, Tuple[str, str]]


@dataclass(frozen=True)
class GraphQLActions:
    persist: str = "/graphql/persist.json"
    execute: str = "/graphql/execute.json"
    list: str = "/graphql/list.json"


@dataclass(frozen=True)
class HeadlessConfig:
    host_uri: str = DEFAULT_HOST_URI
    endpoint: str = DEFAULT_GRAPHQL_ENDPOINT
    auth: Optional[Credential] = None
    actions: GraphQLActions = field(default_factory=GraphQLActions)
    # Same-origin mode: relative paths are sent without the host prefix.
    browser_like: bool = False
