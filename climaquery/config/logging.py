"""Process-wide log setup for climaquery."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the root logger.

    `level` wins over the `LOG_LEVEL` environment variable; `INFO` is used when neither is set.
    Query texts and geocoding results may appear at DEBUG, so keep DEBUG off in shared deployments.
    """

    resolved = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # dateparser logs every language/locale probe at DEBUG.
    logging.getLogger("dateparser").setLevel(logging.WARNING)
