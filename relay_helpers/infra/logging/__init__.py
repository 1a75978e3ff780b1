"""Logging infrastructure.

Basic usage:
    import logging

    from relay_helpers.infra.logging import setup_logging

    setup_logging()  # Reads LOG_* settings
    logger = logging.getLogger(__name__)
"""

from relay_helpers.infra.logging.config import configure_logging, setup_logging
from relay_helpers.infra.logging.formatters import JSONFormatter

__all__ = ["JSONFormatter", "configure_logging", "setup_logging"]
