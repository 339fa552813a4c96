"""SDK configuration loader."""
from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Mapping, Optional

from aem_headless.core.config import Credential, GraphQLActions, HeadlessConfig
from .errors import ConfigError

try:  # Python 3.10 compatibility
    import tomllib  # type: ignore
except ImportError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


DEFAULT_CONFIG_PATH = Path.home() / ".aem-headless" / "config.toml"


def _load_toml(path: Path) -> dict:
    if not path.exists():
        return {}
    data = path.read_bytes()
    try:
        return tomllib.loads(data.decode("utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc


def parse_credential(value: Any) -> Optional[Credential]:
    """Accept a token string or a ``[user, password]`` pair."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and len(value) == 2 and all(isinstance(v, str) for v in value):
        return (value[0], value[1])
    raise ConfigError("auth must be a token string or a [username, password] pair")


def _credential_from(token: Optional[str], user: Optional[str], password: Optional[str]) -> Optional[Credential]:
    if token:
        return token
    if user or password:
        if not (user and password):
            raise ConfigError("Basic auth requires both a user and a password")
        return (user, password)
    return None


def _load_actions(section: Mapping[str, Any]) -> GraphQLActions:
    defaults = GraphQLActions()
    actions = section.get("actions") or {}
    if not isinstance(actions, dict):
        raise ConfigError("[aem.actions] must be a table")
    return GraphQLActions(
        persist=actions.get("persist", defaults.persist),
        execute=actions.get("execute", defaults.execute),
        list=actions.get("list", defaults.list),
    )


def load_config(path: Path | None = None) -> HeadlessConfig:
    """Resolve configuration from defaults, the TOML file and the environment.

    Environment variables (``AEM_HOST_URI``, ``AEM_GRAPHQL_ENDPOINT``,
    ``AEM_TOKEN``, ``AEM_USER``, ``AEM_PASS``) take precedence over the file.
    """
    cfg = HeadlessConfig()
    file_data = _load_toml(path or DEFAULT_CONFIG_PATH)
    section = file_data.get("aem", file_data) if isinstance(file_data, dict) else {}

    host = os.environ.get("AEM_HOST_URI") or section.get("host") or section.get("host_uri") or cfg.host_uri
    endpoint = os.environ.get("AEM_GRAPHQL_ENDPOINT") or section.get("endpoint") or cfg.endpoint

    auth = _credential_from(
        os.environ.get("AEM_TOKEN"),
        os.environ.get("AEM_USER"),
        os.environ.get("AEM_PASS"),
    )
    if auth is None:
        auth = _credential_from(section.get("token"), section.get("user"), section.get("password"))

    browser_like = section.get("browser_like", cfg.browser_like)
    if not isinstance(browser_like, bool):
        raise ConfigError(f"browser_like must be a boolean, got {browser_like!r}")

    return HeadlessConfig(
        host_uri=host,
        endpoint=endpoint,
        auth=auth,
        actions=_load_actions(section),
        browser_like=browser_like,
    )


def merge_overrides(
    config: HeadlessConfig,
    host: str | None = None,
    endpoint: str | None = None,
    auth: Any = None,
) -> HeadlessConfig:
    updated = config
    if host:
        updated = replace(updated, host_uri=host)
    if endpoint:
        updated = replace(updated, endpoint=endpoint)
    credential = parse_credential(auth)
    if credential is not None:
        updated = replace(updated, auth=credential)
    return updated
