"""
Centralized logging configuration for the storefront service.

Every module asks `get_logger(__name__)` for its logger; `setup_logging()` is
called once when the FastAPI app is built and routes all records to stdout
with a common format.
"""

import logging
import sys

from storefront.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    """
    Configures the root logger.

    - Level from LOG_LEVEL (default INFO)
    - Console output on stdout, container friendly
    - Stripe and SQLAlchemy chatter reduced to warnings
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("stripe").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name):
    """Returns the logger for a module, usually called with `__name__`."""
    return logging.getLogger(name)
