from __future__ import annotations

from typing import Protocol

import requests

from webber.core.models import RequestSpec
from webber.http.response import HttpResponse
from webber.utils.logging import get_logger


class HttpClient(Protocol):
    """Protocol for HTTP transports."""

    def send(self, req: RequestSpec) -> HttpResponse: ...


class RequestsHttpClient:
    """HTTP transport using the requests library. Single attempt, no retries."""

    def __init__(self, timeout_s: float = 30):
        self.session = requests.Session()
        self.timeout_s = timeout_s
        self.log = get_logger("webber.http")

    def send(self, req: RequestSpec) -> HttpResponse:
        """Send a request and block until the full response has been read.

        Transport errors (DNS, refused connection, malformed URL, timeout)
        propagate as ``requests.RequestException``.
        """
        self.log.debug("%s %s", req.method, req.url)
        r = self.session.request(
            method=req.method,
            url=req.url,
            headers=req.headers,
            data=req.body,
            auth=req.auth,
            timeout=self.timeout_s,
        )
        return HttpResponse(
            status_code=r.status_code,
            content=r.content,
            content_type=r.headers.get("Content-Type"),
        )

    def close(self) -> None:
        self.session.close()
