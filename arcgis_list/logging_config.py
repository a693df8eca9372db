"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger.

    Args:
        config: Logging settings, defaults to get_config().observability.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    logging.basicConfig(level=level, format=config.format, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"level": config.level.upper()}
    )
