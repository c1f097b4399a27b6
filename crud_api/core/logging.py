"""Console logging setup shared by the API process and the CLI helpers."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger (only once per process)."""
    root = logging.getLogger()
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    if not root.handlers:
        logging.basicConfig(level=numeric, format=LOG_FORMAT)
    root.setLevel(numeric)
