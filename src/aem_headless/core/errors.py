"""Core exception hierarchy."""
from __future__ import annotations

from typing import Any, Dict, Union

Status = Union[int, str]


class HeadlessError(Exception):
    """Base class for AEM headless client errors."""


class SDKError(HeadlessError):
    """Normalized request failure.

    Every failure of the request pipeline is raised as an instance of this
    class (or one of its subclasses), so callers only ever inspect one shape:
    ``name``, ``type``, ``status``, ``message`` and ``details``. ``status`` is
    the HTTP status code, or an empty string when no response was received.
    """

    def __init__(
        self,
        name: str | None = None,
        error_type: str | None = None,
        status: Status = "",
        message: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message or name or self.__class__.__name__)
        self.name = name
        self.type = error_type
        self.status = "" if status is None else status
        self.message = message
        self.details = details

    @classmethod
    def from_exception(cls, exc: BaseException, status: Status = "") -> "SDKError":
        """Build an error from an arbitrary exception's own fields."""
        name = getattr(exc, "name", None)
        if not isinstance(name, str) or not name:
            name = type(exc).__name__
        error_type = getattr(exc, "type", None)
        if not isinstance(error_type, str) or not error_type:
            error_type = name
        return cls(name, error_type, status, str(exc) or None, getattr(exc, "details", None))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "status": self.status,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, type={self.type!r}, "
            f"status={self.status!r}, message={self.message!r})"
        )


class NetworkFailure(SDKError):
    """The transport call failed before any HTTP response existed."""


class UpstreamStructuredError(SDKError):
    """Non-ok response whose body described the error."""


class UpstreamUnparseableError(SDKError):
    """Non-ok response whose body was not valid JSON."""


class ResponseParseError(SDKError):
    """Ok response whose body was not valid JSON."""
