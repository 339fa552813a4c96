"""aem-headless CLI entrypoint."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from aem_headless.core.errors import SDKError
from aem_headless.core.utils.io import load_structured, read_query
from aem_headless.core.utils.logging import get_logger
from aem_headless.sdk.client import AEMHeadless
from aem_headless.sdk.config import DEFAULT_CONFIG_PATH, load_config
from aem_headless.sdk.errors import ConfigError

app = typer.Typer(add_completion=False, help="AEM headless GraphQL CLI")


class Context:
    def __init__(self) -> None:
        self.config = load_config()
        self.host: Optional[str] = None
        self.endpoint: Optional[str] = None
        self.auth: Any = None


# --- utility helpers ---

def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _handle_exc(err: Exception) -> None:
    """Print a concise error and exit non-zero."""
    if isinstance(err, SDKError):
        typer.echo(f"Error: {json.dumps(err.to_dict(), default=str)}", err=True)
    else:
        typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def _toml_string(value: str) -> str:
    # ASCII-escaped JSON strings are valid TOML basic strings.
    return json.dumps(value)


def _make_client(ctx: Context) -> AEMHeadless:
    return AEMHeadless(endpoint=ctx.endpoint, host=ctx.host, auth=ctx.auth, config=ctx.config)


def _load_variables(path: Path | None) -> Optional[dict]:
    if not path:
        return None
    data = load_structured(path)
    if not isinstance(data, dict):
        raise ConfigError("--variables must contain a JSON/YAML object")
    return data


def _run(ctx: typer.Context, call) -> None:
    context: Context = ctx.obj
    try:
        client = _make_client(context)
        result = call(client)
    except (ConfigError, SDKError, FileNotFoundError, ValueError) as exc:
        _handle_exc(exc)
    _print_json(result)


# --- CLI commands ---


@app.callback()
def main(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="AEM host URI"),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="GraphQL endpoint path or URL"),
    token: Optional[str] = typer.Option(None, "--token", help="Bearer token"),
    user: Optional[str] = typer.Option(None, "--user", help="Basic auth user"),
    password: Optional[str] = typer.Option(None, "--password", help="Basic auth password"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    if ctx.obj is None:
        try:
            ctx.obj = Context()
        except ConfigError as exc:
            _handle_exc(exc)
    context: Context = ctx.obj
    context.host = host
    context.endpoint = endpoint
    if token:
        context.auth = token
    elif user or password:
        if not (user and password):
            _handle_exc(ConfigError("--user and --password must be given together"))
        context.auth = (user, password)
    if verbose:
        get_logger(level=logging.DEBUG)


@app.command()
def init(
    ctx: typer.Context,
    host: str = typer.Option("", "--host", help="Default AEM host URI"),
    endpoint: str = typer.Option("", "--endpoint", help="Default GraphQL endpoint"),
) -> None:
    context: Context = ctx.obj
    cfg_dir = DEFAULT_CONFIG_PATH.parent
    cfg_dir.mkdir(parents=True, exist_ok=True)
    lines = ["[aem]"]
    lines.append(f"host = {_toml_string(host or context.host or context.config.host_uri)}")
    lines.append(f"endpoint = {_toml_string(endpoint or context.endpoint or context.config.endpoint)}")
    DEFAULT_CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")
    typer.echo(f"Wrote TOML config to {DEFAULT_CONFIG_PATH}")


@app.command()
def query(
    ctx: typer.Context,
    query_file: Optional[Path] = typer.Argument(None, help="File containing the GraphQL query"),
    query_text: Optional[str] = typer.Option(None, "--query", "-q", help="Inline GraphQL query"),
    variables: Optional[Path] = typer.Option(None, "--variables", help="JSON/YAML variables file"),
) -> None:
    """Run an ad-hoc query against the GraphQL endpoint."""
    if not query_file and not query_text:
        _handle_exc(ConfigError("Provide a query file or --query"))

    def call(client: AEMHeadless):
        text = query_text or read_query(query_file)
        return client.run_query(text, variables=_load_variables(variables))

    _run(ctx, call)


@app.command()
def persist(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Persisted query path, e.g. wknd/adventures"),
    query_file: Path = typer.Argument(..., help="File containing the GraphQL query"),
) -> None:
    """Persist a query under NAME."""
    _run(ctx, lambda client: client.persist_query(read_query(query_file), name))


@app.command("get")
def get_persisted(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Persisted query path"),
    variables: Optional[Path] = typer.Option(None, "--variables", help="JSON/YAML variables file"),
) -> None:
    """Run the persisted query NAME."""
    _run(ctx, lambda client: client.run_persisted_query(name, variables=_load_variables(variables)))


@app.command("list")
def list_persisted(ctx: typer.Context) -> None:
    """List persisted queries."""
    _run(ctx, lambda client: client.list_persisted_queries())


if __name__ == "__main__":  # pragma: no cover
    app()
