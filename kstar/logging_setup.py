"""Apply the configured log levels."""

from __future__ import annotations

import logging
from typing import Optional

from .config import CONFIG, Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(config: Optional[Config] = None) -> None:
    """Configure the root logger and per-module levels from ``config``."""

    cfg = (config or CONFIG).logging
    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


__all__ = ["configure_logging", "LOG_FORMAT"]
