from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union

from webber.core.models import EncodingType


@dataclass(frozen=True)
class BodyEncoder:
    """Turns request body text into bytes with a fixed codec."""

    codec: str
    errors: str = "strict"

    def encode(self, text: str) -> bytes:
        return text.encode(self.codec, self.errors)


UTF8_ENCODER = BodyEncoder("utf-8")

# Unicode and UTF-32 are written without a byte order mark.
_ENCODERS: Dict[EncodingType, BodyEncoder] = {
    EncodingType.UNICODE: BodyEncoder("utf-16-le"),
    EncodingType.ASCII: BodyEncoder("ascii", errors="replace"),
    EncodingType.UTF7: BodyEncoder("utf-7"),
    EncodingType.UTF8: UTF8_ENCODER,
    EncodingType.UTF32: BodyEncoder("utf-32-le"),
}


def _coerce(selector: Union[EncodingType, str, None]) -> Optional[EncodingType]:
    if isinstance(selector, EncodingType):
        return selector
    if isinstance(selector, str):
        key = selector.strip().upper().replace("-", "").replace("_", "")
        try:
            return EncodingType(key)
        except ValueError:
            return None
    return None


def resolve_encoding(selector: Union[EncodingType, str, None]) -> BodyEncoder:
    """Map an encoding selector to a body encoder; unknown selectors fall back to UTF-8."""
    encoding = _coerce(selector)
    if encoding is None:
        return UTF8_ENCODER
    return _ENCODERS.get(encoding, UTF8_ENCODER)


def encode_body(selector: Union[EncodingType, str, None], text: str) -> bytes:
    return resolve_encoding(selector).encode(text)
