from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HttpResponse:
    """Raw HTTP response as received from the transport."""

    status_code: int
    content: bytes
    content_type: Optional[str] = None

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, whatever charset the server declared."""
        return self.content.decode("utf-8", errors="replace")
