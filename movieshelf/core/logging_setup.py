# movieshelf/core/logging_setup.py

import logging
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """
    Console logging via logging.basicConfig.
    Unknown level names fall back to INFO.
    """
    level_value = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
