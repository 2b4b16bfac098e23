from __future__ import annotations

from typing import Callable, Optional

from webber.core.models import WebberResponse
from webber.utils.logging import get_logger

ErrorHandler = Callable[[WebberResponse], None]


class ErrorNotifier:
    """Side channel for request and deserialization failures.

    The registered handler is isolated: anything it raises is logged and
    dropped so a failing handler never breaks the request path.
    """

    def __init__(self, handler: Optional[ErrorHandler] = None):
        self.handler = handler
        self.log = get_logger("webber.notifier")

    def notify(self, response: WebberResponse, error: Optional[BaseException] = None) -> None:
        """Invoke the handler with ``response``. ``error`` is logged first when given."""
        if error is not None:
            self.log.warning("Deserialization failed: %s", error, exc_info=error)

        if self.handler is None:
            return

        try:
            self.handler(response)
        except Exception:
            self.log.exception("Error handler raised")
            self.log.error("Response body: %s", response.raw_body)
