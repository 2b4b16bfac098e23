from __future__ import annotations

import traceback
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

from requests.structures import CaseInsensitiveDict

from webber.core.errors import UnsupportedContentTypeError
from webber.core.models import (
    ContentType,
    EncodingType,
    MethodType,
    RequestSpec,
    TypedResponse,
    WebberConfig,
    WebberResponse,
)
from webber.core.notifier import ErrorNotifier
from webber.http.client import HttpClient, RequestsHttpClient
from webber.http.encoding import encode_body
from webber.transform.json_codec import DeserializationError, adapter_for, default_value, from_json
from webber.utils.logging import get_logger

T = TypeVar("T")

Headers = Union[Mapping[str, str], Iterable[Tuple[str, str]], None]
Encoding = Union[EncodingType, str, None]

# Headers owned by the client; caller supplied values never replace them.
RESERVED_HEADERS = frozenset({"content-type", "user-agent", "content-length"})


def _header_pairs(custom_headers: Headers) -> Iterable[Tuple[str, str]]:
    if custom_headers is None:
        return ()
    if isinstance(custom_headers, Mapping):
        return custom_headers.items()
    return custom_headers


class Webber:
    """
    Synchronous HTTP request helper.

    Every call returns a ``WebberResponse``; transport failures are reported
    through ``success=False`` and the configured error handler instead of
    being raised.
    """

    def __init__(self, config: Optional[WebberConfig] = None, client: Optional[HttpClient] = None):
        self.config = config or WebberConfig()
        self._owns_client = client is None
        self.client = client or RequestsHttpClient(timeout_s=self.config.timeout_s)
        self.notifier = ErrorNotifier(self.config.error_handler)
        self.log = get_logger("webber.client")

    def with_error_handler(self, handler) -> "Webber":
        """Copy of this client sharing its transport, with a different error handler."""
        return Webber(replace(self.config, error_handler=handler), client=self.client)

    def with_app_name(self, app_name: str) -> "Webber":
        """Copy of this client sharing its transport, with a different User-Agent."""
        return Webber(replace(self.config, app_name=app_name), client=self.client)

    def close(self) -> None:
        """Close the transport if this instance created it.

        Transports passed in, and those shared by ``with_app_name`` /
        ``with_error_handler`` copies, are left to their owner.
        """
        if not self._owns_client:
            return
        close = getattr(self.client, "close", None)
        if callable(close):
            close()

    # -- request invoker -------------------------------------------------

    def invoke(
        self,
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        method: str = MethodType.POST,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> WebberResponse:
        """
        Perform a single HTTP request.

        Args:
            url: Absolute URL of the request.
            data: Request payload. Empty or None sends no body.
            content_type: Content-Type of the request. None omits the header.
            method: HTTP verb, see ``MethodType``.
            encoding: Encoding of the payload, see ``EncodingType``.
            credentials: Passed to the transport as-is (requests ``auth``).
            custom_headers: Extra headers, a mapping or (name, value) pairs.

        Returns:
            A WebberResponse. Any HTTP status counts as success; transport
            failures yield ``success=False`` and status -1.
        """
        try:
            req = self._build_request(url, data, content_type, method, encoding, credentials, custom_headers)
            raw = self.client.send(req)
        except Exception as exc:
            self.log.exception("%s %s failed: %s", method, url, type(exc).__name__)
            response = WebberResponse.failure(
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            )
            self.notifier.notify(response)
            return response

        return WebberResponse(
            status_code=raw.status_code,
            success=True,
            raw_body=raw.text,
            content_type=raw.content_type,
        )

    def _build_request(
        self,
        url: str,
        data: Optional[str],
        content_type: Optional[str],
        method: str,
        encoding: Encoding,
        credentials: Any,
        custom_headers: Headers,
    ) -> RequestSpec:
        headers = CaseInsensitiveDict()
        if content_type:
            headers["Content-Type"] = content_type
        headers["User-Agent"] = self.config.app_name

        body = None
        if data:
            body = encode_body(encoding, data)
            headers["Content-Length"] = str(len(body))

        for name, value in _header_pairs(custom_headers):
            if name.lower() in RESERVED_HEADERS:
                self.log.debug("Ignoring custom header %s; it is set by the client", name)
                continue
            if name in headers:
                headers[name] = f"{headers[name]}, {value}"
            else:
                headers[name] = value

        return RequestSpec(url=url, method=method, headers=headers, body=body, auth=credentials)

    # -- typed deserializer ----------------------------------------------

    def invoke_typed(
        self,
        result_type: Type[T],
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        method: str = MethodType.POST,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> TypedResponse[T]:
        """
        Perform a request and deserialize the JSON response into ``result_type``.

        Raises:
            UnsupportedContentTypeError: If ``content_type`` is not
                application/json. Checked before any network I/O.
            UnsupportedResultTypeError: If ``result_type`` cannot be built
                from JSON. Also checked before any network I/O.
        """
        if content_type != ContentType.JSON:
            raise UnsupportedContentTypeError(content_type)
        adapter_for(result_type)

        response = self.invoke(url, data, content_type, method, encoding, credentials, custom_headers)
        return self._deserialize(response, result_type)

    def _deserialize(self, response: WebberResponse, result_type: Type[T]) -> TypedResponse[T]:
        if not response.success:
            # already reported by invoke
            return TypedResponse.from_response(response, default_value(result_type))

        try:
            result = from_json(response.raw_body, result_type)
        except DeserializationError as exc:
            typed = TypedResponse.from_response(response, default_value(result_type))
            self.notifier.notify(typed, exc)
            return typed

        return TypedResponse.from_response(response, result)

    # -- convenience verbs -----------------------------------------------

    def get(
        self,
        url: str,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> WebberResponse:
        """Perform a GET request. No body and no Content-Type header are sent."""
        return self.invoke(url, None, None, MethodType.GET, encoding, credentials, custom_headers)

    def get_typed(
        self,
        result_type: Type[T],
        url: str,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> TypedResponse[T]:
        """Perform a GET request and deserialize the JSON response."""
        return self.invoke_typed(
            result_type, url, None, ContentType.JSON, MethodType.GET, encoding, credentials, custom_headers
        )

    def post(
        self,
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> WebberResponse:
        return self.invoke(url, data, content_type, MethodType.POST, encoding, credentials, custom_headers)

    def post_typed(
        self,
        result_type: Type[T],
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> TypedResponse[T]:
        return self.invoke_typed(
            result_type, url, data, content_type, MethodType.POST, encoding, credentials, custom_headers
        )

    def put(
        self,
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> WebberResponse:
        return self.invoke(url, data, content_type, MethodType.PUT, encoding, credentials, custom_headers)

    def put_typed(
        self,
        result_type: Type[T],
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> TypedResponse[T]:
        return self.invoke_typed(
            result_type, url, data, content_type, MethodType.PUT, encoding, credentials, custom_headers
        )

    def patch(
        self,
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> WebberResponse:
        return self.invoke(url, data, content_type, MethodType.PATCH, encoding, credentials, custom_headers)

    def patch_typed(
        self,
        result_type: Type[T],
        url: str,
        data: Optional[str] = "",
        content_type: Optional[str] = ContentType.JSON,
        encoding: Encoding = EncodingType.UTF8,
        credentials: Any = None,
        custom_headers: Headers = None,
    ) -> TypedResponse[T]:
        return self.invoke_typed(
            result_type, url, data, content_type, MethodType.PATCH, encoding, credentials, custom_headers
        )
