"""Error normalization for transport failures and HTTP responses.

Upstream servers report errors as a single ``{"error": {...}}`` object, as a
GraphQL-style ``{"errors": [...]}`` list, or not at all. Error bodies are
decoded into one of three variants and then mapped onto ``SDKError``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from .errors import (
    NetworkFailure,
    ResponseParseError,
    SDKError,
    Status,
    UpstreamStructuredError,
    UpstreamUnparseableError,
)
from .transport import Response


@dataclass
class StructuredSingle:
    error: Dict[str, Any]


@dataclass
class StructuredList:
    errors: List[Dict[str, Any]]


@dataclass
class Unparseable:
    name: str
    type: str
    message: str | None = None
    details: Any = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Unparseable":
        err = SDKError.from_exception(exc)
        return cls(name=err.name, type=err.type, message=err.message, details=err.details)


ParsedErrorBody = Union[StructuredSingle, StructuredList, Unparseable]


def decode_error_body(payload: Any) -> ParsedErrorBody:
    """Classify a parsed non-ok response body. ``error`` wins over ``errors``."""
    if isinstance(payload, dict):
        single = payload.get("error")
        if isinstance(single, dict):
            return StructuredSingle(single)
        errors = payload.get("errors")
        if isinstance(errors, list):
            items = [item for item in errors if isinstance(item, dict)]
            if items:
                return StructuredList(items)
        if isinstance(single, str):
            return StructuredSingle({"message": single})
        # Bare error object, e.g. {"message": "...", "errorType": "..."}
        return StructuredSingle(payload)
    return Unparseable(
        name="UnexpectedErrorBody",
        type="UnexpectedErrorBody",
        message="Error response body is not a JSON object",
        details=payload,
    )


def _structured_error(source: Dict[str, Any], status: Status) -> SDKError:
    name = source.get("errorType") or source.get("name")
    error_type = source.get("type") or source.get("name")
    return UpstreamStructuredError(
        name or UpstreamStructuredError.__name__,
        error_type or name or UpstreamStructuredError.__name__,
        status,
        source.get("message"),
        source.get("details"),
    )


def map_error_body(body: ParsedErrorBody, status: Status) -> SDKError:
    if isinstance(body, StructuredSingle):
        return _structured_error(body.error, status)
    if isinstance(body, StructuredList):
        return _structured_error(body.errors[0], status)
    return UpstreamUnparseableError(body.name, body.type or body.name, status, body.message, body.details)


def normalize_transport_failure(exc: BaseException) -> SDKError:
    """Pass ``SDKError`` through unchanged, wrap anything else with an empty status."""
    if isinstance(exc, SDKError):
        return exc
    return NetworkFailure.from_exception(exc, status="")


def error_from_response(response: Response) -> SDKError:
    try:
        payload = response.json()
    except ValueError as exc:
        body: ParsedErrorBody = Unparseable.from_exception(exc)
    else:
        body = decode_error_body(payload)
    return map_error_body(body, response.status)


def read_response(response: Response) -> Any:
    """Return the parsed JSON body of ``response`` or raise the normalized error."""
    if not response.ok:
        raise error_from_response(response)
    try:
        return response.json()
    except ValueError as exc:
        raise ResponseParseError.from_exception(exc, status=response.status) from exc
