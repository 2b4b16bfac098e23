from webber.core.client import Webber
from webber.core.errors import UnsupportedContentTypeError, WebberError
from webber.core.models import (
    TRANSPORT_FAILURE_STATUS,
    ContentType,
    EncodingType,
    MethodType,
    TypedResponse,
    WebberConfig,
    WebberResponse,
)
from webber.core.notifier import ErrorNotifier
from webber.transform.json_codec import from_json, to_json

__all__ = [
    "TRANSPORT_FAILURE_STATUS",
    "ContentType",
    "EncodingType",
    "ErrorNotifier",
    "MethodType",
    "TypedResponse",
    "UnsupportedContentTypeError",
    "Webber",
    "WebberConfig",
    "WebberError",
    "WebberResponse",
    "from_json",
    "to_json",
]
