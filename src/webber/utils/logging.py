from __future__ import annotations
import logging
import logging.config
import os
from pathlib import Path
import yaml

ROOT_LOGGER = "webber"
LEVEL_ENV_VAR = "WEBBER_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(config_path: str = "configs/logging.yaml", level: int = logging.INFO) -> None:
    """
    Configure logging for the command line runner.

    Loads a YAML dictConfig when ``config_path`` exists, otherwise falls back
    to ``basicConfig`` at ``level``. ``WEBBER_LOG_LEVEL`` (e.g. ``DEBUG``)
    overrides the level of the ``webber`` logger in both cases.
    """
    path = Path(config_path)
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            logging.config.dictConfig(yaml.safe_load(f))
    else:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT)

    override = os.environ.get(LEVEL_ENV_VAR, "").strip().upper()
    if override:
        if not isinstance(logging.getLevelName(override), int):
            raise ValueError(f"{LEVEL_ENV_VAR} must be a logging level name, got {override!r}")
        logging.getLogger(ROOT_LOGGER).setLevel(override)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``webber`` namespace; bare names are prefixed."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
