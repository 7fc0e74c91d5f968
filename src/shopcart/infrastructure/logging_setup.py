"""Root logger configuration for the CLI entry point.

Library code only ever calls ``logging.getLogger(__name__)``; handlers
and levels are decided here, once, by the process that owns stderr.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
