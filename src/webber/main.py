from __future__ import annotations

import sys

from webber.config_models import RequestFileConfig, load_and_validate_config
from webber.core.client import Webber
from webber.core.models import WebberResponse
from webber.transform.json_codec import to_json
from webber.utils.logging import get_logger, setup_logging

log = get_logger("webber.main")


def _log_failure(response: WebberResponse) -> None:
    lines = response.raw_body.strip().splitlines()
    log.error("Request failed: %s", lines[-1] if lines else "unknown error")


def run_request(config: RequestFileConfig, client=None) -> WebberResponse:
    """Send the request described by a validated request file."""
    req = config.request
    webber = Webber(
        config.to_webber_config(error_handler=_log_failure),
        client=client,
    )

    data = req.body
    if req.json_body is not None:
        data = to_json(req.json_body)

    credentials = (req.auth.username, req.auth.password) if req.auth else None

    try:
        return webber.invoke(
            req.url,
            data=data,
            content_type=req.content_type,
            method=req.method,
            encoding=req.encoding,
            credentials=credentials,
            custom_headers=req.headers,
        )
    finally:
        webber.close()


def main() -> None:
    """Command line entry point: send the request described in a YAML file."""
    if len(sys.argv) < 2:
        print("Usage: webber configs/requests/<request>.yaml")
        raise SystemExit(2)

    setup_logging("configs/logging.yaml")

    request_path = sys.argv[1]
    try:
        config = load_and_validate_config(request_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        raise SystemExit(2)

    response = run_request(config)

    print(f"Status: {response.status_code}")
    print(f"Success: {response.success}")
    print(f"Content-Type: {response.content_type}")
    print(response.raw_body)

    if not response.success:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
