from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")

TRANSPORT_FAILURE_STATUS = -1


class ContentType:
    """MIME types for a request body."""

    FORM_ENCODED = "application/x-www-form-urlencoded"
    ATOM = "application/atom+xml"
    JSON = "application/json"
    JAVASCRIPT = "application/javascript"
    SOAP = "application/soap+xml"
    XML = "text/xml"
    HTML = "text/html"


class MethodType:
    """HTTP verbs supported by the client."""

    POST = "POST"
    GET = "GET"
    PUT = "PUT"
    PATCH = "PATCH"

    ALL = (POST, GET, PUT, PATCH)


class EncodingType(str, Enum):
    """Character encoding of the request body."""

    UNICODE = "UNICODE"
    ASCII = "ASCII"
    UTF7 = "UTF7"
    UTF8 = "UTF8"
    UTF32 = "UTF32"


@dataclass(frozen=True)
class WebberConfig:
    """Per-client configuration."""

    app_name: str = "Webber"
    error_handler: Optional[Callable[["WebberResponse"], None]] = None
    timeout_s: float = 30


@dataclass(frozen=True)
class RequestSpec:
    """Fully assembled request handed to the transport."""

    url: str
    method: str = MethodType.POST
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    auth: Any = None


@dataclass(frozen=True)
class WebberResponse:
    """
    Outcome of a single invocation.

    ``success`` is True whenever a response was received, whatever its status
    code. On transport failure ``status_code`` is ``TRANSPORT_FAILURE_STATUS``
    and ``raw_body`` carries the failure diagnostics.
    """

    status_code: int = TRANSPORT_FAILURE_STATUS
    success: bool = False
    raw_body: str = ""
    content_type: Optional[str] = None

    @classmethod
    def failure(cls, diagnostics: str) -> "WebberResponse":
        return cls(status_code=TRANSPORT_FAILURE_STATUS, success=False, raw_body=diagnostics)


@dataclass(frozen=True)
class TypedResponse(WebberResponse, Generic[T]):
    """Envelope extended with a deserialized payload."""

    result: Optional[T] = None

    @classmethod
    def from_response(cls, response: WebberResponse, result: Optional[T]) -> "TypedResponse[T]":
        """Copy every envelope field from ``response`` and attach ``result``."""
        copied = {f.name: getattr(response, f.name) for f in fields(WebberResponse)}
        return cls(result=result, **copied)
