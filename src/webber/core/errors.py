class WebberError(Exception):
    """Base class for errors raised by webber."""


class UnsupportedContentTypeError(WebberError, ValueError):
    """Raised when typed access is requested for a non-JSON content type."""

    def __init__(self, content_type):
        self.content_type = content_type
        super().__init__(
            f"{content_type} is not supported. Only application/json is supported for "
            "auto-deserialization. Use Webber.invoke for other content types."
        )


class UnsupportedResultTypeError(WebberError, TypeError):
    """Raised when a typed call targets a type that cannot be built from JSON."""

    def __init__(self, result_type):
        self.result_type = result_type
        name = getattr(result_type, "__qualname__", repr(result_type))
        super().__init__(
            f"{name} cannot be deserialized from JSON. Use a pydantic model, a dataclass, a "
            "TypedDict or a builtin type."
        )
